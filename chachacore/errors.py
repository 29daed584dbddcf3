# errors.py - validation errors raised at the ChaCha20 core boundary


class ChaChaError(ValueError):
    """Base class for malformed ChaCha20 inputs."""


class InvalidKeyLength(ChaChaError):
    def __init__(self, length: int, unit: str = "bytes"):
        self.length = length
        super().__init__(f"key must be 32 bytes / 8 words (got {length} {unit})")


class InvalidNonceLength(ChaChaError):
    def __init__(self, length: int, unit: str = "words"):
        self.length = length
        super().__init__(f"nonce must be 12 bytes / 3 words (got {length} {unit})")


class InvalidStateLength(ChaChaError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"state must be 16 words (got {length})")


class InvalidWord(ChaChaError):
    def __init__(self, value, what: str = "word"):
        self.value = value
        super().__init__(f"{what} must be an int in 0..0xffffffff (got {value!r})")
