"""
Voucher Signers
"""

from lazymint.signers.base import VoucherSigner
from lazymint.signers.evm_signer import EvmVoucherSigner

__all__ = ["VoucherSigner", "EvmVoucherSigner"]
