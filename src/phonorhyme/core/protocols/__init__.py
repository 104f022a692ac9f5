from .reading import PhoneticReadingProvider, PhoneticToken

__all__ = ["PhoneticReadingProvider", "PhoneticToken"]
