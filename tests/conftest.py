"""
Pytest configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from lazymint.signers import EvmVoucherSigner, VoucherSigner

TEST_CHAIN_ID = 31337
TEST_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
OTHER_CONTRACT_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"


@pytest.fixture
def mock_evm_private_key():
    """Fixed EVM private key for tests"""
    return "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture
def mock_evm_address():
    """Address derived from mock_evm_private_key"""
    return "0xFCAd0B19bB29D4674531d6f115237E16AfCE377c"


@pytest.fixture
def evm_signer(mock_evm_private_key):
    """Real signer bound to the local hardhat chain id"""
    return EvmVoucherSigner.from_private_key(mock_evm_private_key, chain_id=TEST_CHAIN_ID)


@pytest.fixture
def mock_signer():
    """Signer double with a fixed chain id and signature"""
    signer = MagicMock(spec=VoucherSigner)
    signer.get_chain_id = AsyncMock(return_value=TEST_CHAIN_ID)
    signer.sign_digest = AsyncMock(return_value=b"\xab" * 65)
    return signer


@pytest.fixture
def anyio_backend():
    """The library is built on asyncio primitives; run anyio tests on asyncio only"""
    return "asyncio"
