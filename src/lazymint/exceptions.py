"""
lazymint custom exception hierarchy
"""


class LazyMintError(Exception):
    """lazymint base exception"""

    pass


class ValidationError(LazyMintError):
    """Validation-related error"""

    pass


class InvalidInputError(ValidationError):
    """Voucher fields or constructor arguments are invalid"""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Invalid value for {field}")


class EncodingError(InvalidInputError):
    """Typed data cannot be encoded per EIP-712"""

    def __init__(self, message: str, field: str = "typedData"):
        super().__init__(field, message)


class ConfigurationError(LazyMintError):
    """Configuration-related error"""

    pass


class DomainResolutionError(ConfigurationError):
    """Signing domain could not be resolved (chain id query failed)"""

    pass


class UnsupportedNetworkError(DomainResolutionError):
    """Unsupported network"""

    pass


class SignatureError(LazyMintError):
    """Signature-related error"""

    pass


class SigningError(SignatureError):
    """Signing capability failed or rejected the digest"""

    pass
