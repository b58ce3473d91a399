"""Transfer engine specific exceptions."""

from zercoin.domain.common.exceptions import SameWalletTransferError

__all__ = ["SameWalletTransferError"]
