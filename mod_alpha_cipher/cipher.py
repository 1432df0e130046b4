"""
Modified-Alphabet Cipher
========================
Polyalphabetic substitution over the 33-letter Russian alphabet.

Each letter is replaced by its position (А=0 … Я=32), the key letters
are added position by position (the key repeats as needed), and the sum
is reduced modulo 33. Decryption subtracts instead of adding.

Only the letters of ALPHABET, in either case, are accepted. Output is
upper-case, so "привет" and "ПРИВЕТ" encrypt identically; anything else (spaces,
digits, punctuation, Latin letters) is rejected before any work is done.

Not secure. A teaching cipher in the Vigenère family.
"""

import enum
import logging

logger = logging.getLogger(__name__)

ALPHABET      = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
ALPHABET_SIZE = len(ALPHABET)

# upper- and lower-case forms; anything else is rejected before upper-casing
_POSITIONS = {letter: idx for idx, letter in enumerate(ALPHABET)}
_POSITIONS.update({letter: idx for idx, letter in enumerate(ALPHABET.lower())})


class ErrorKind(enum.Enum):
    INVALID_KEY         = "invalid key"
    INVALID_PLAIN_TEXT  = "invalid open text"
    INVALID_CIPHER_TEXT = "invalid cipher text"


class CipherError(ValueError):
    """Raised for a bad key, open text or cipher text. See `kind`."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ModAlphaCipher:
    """
    Vigenère-style cipher over ALPHABET.

    The key is validated and converted to alphabet positions once, at
    construction. The instance is read-only afterwards and may be shared
    freely between threads.
    """

    ALPHA = ALPHABET

    __slots__ = ("_key",)

    def __init__(self, key: str):
        valid = self._validate(key, ErrorKind.INVALID_KEY, "key")
        self._key = tuple(self._to_indices(valid))
        logger.debug("Cipher ready, key length %d", len(self._key))

    @property
    def key(self) -> tuple:
        """Key as alphabet positions."""
        return self._key

    def encrypt(self, open_text: str) -> str:
        """Encrypt open text. Returns upper-case cipher text of the same length."""
        text = self._validate(open_text, ErrorKind.INVALID_PLAIN_TEXT, "open text")
        klen = len(self._key)
        out  = [(p + self._key[i % klen]) % ALPHABET_SIZE
                for i, p in enumerate(self._to_indices(text))]
        return self._to_text(out)

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt cipher text. Returns upper-case open text."""
        text = self._validate(cipher_text, ErrorKind.INVALID_CIPHER_TEXT, "cipher text")
        klen = len(self._key)
        out  = [(c - self._key[i % klen] + ALPHABET_SIZE) % ALPHABET_SIZE
                for i, c in enumerate(self._to_indices(text))]
        return self._to_text(out)

    def __repr__(self):
        return f"ModAlphaCipher(key_length={len(self._key)})"

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _validate(text: str, kind: ErrorKind, subject: str) -> str:
        """
        Check every character of `text` against ALPHABET (either case),
        then upper-case it.
        Raises CipherError(kind) on empty input or a foreign character.
        """
        if text is None:
            logger.debug("Rejected %s: None", subject)
            raise CipherError(kind, f"Empty {subject}")
        if not isinstance(text, str):
            logger.debug("Rejected %s: not a string", subject)
            raise CipherError(kind, f"Invalid {subject}: expected str, "
                                    f"got {type(text).__name__}")
        if not text:
            logger.debug("Rejected %s: empty", subject)
            raise CipherError(kind, f"Empty {subject}")
        for pos, ch in enumerate(text):
            if ch not in _POSITIONS:
                logger.debug("Rejected %s: foreign character at %d", subject, pos)
                raise CipherError(kind, f"Invalid {subject}: {ch!r} at position {pos} "
                                        f"is not in the alphabet")
        return text.upper()

    @staticmethod
    def _to_indices(text: str) -> list:
        return [_POSITIONS[ch] for ch in text]

    @classmethod
    def _to_text(cls, indices) -> str:
        return "".join(cls.ALPHA[i] for i in indices)
