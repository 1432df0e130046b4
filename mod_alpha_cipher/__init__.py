"""
mod_alpha_cipher
================
Vigenère-style substitution cipher over the 33-letter Russian alphabet
(А … Я, including Ё).

    from mod_alpha_cipher import ModAlphaCipher

    c  = ModAlphaCipher("КЛЮЧ")
    ct = c.encrypt("текст")        # "ЭРИИЭ"
    pt = c.decrypt(ct)             # "ТЕКСТ"

Bad keys and bad input raise CipherError; its `kind` says which.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .cipher import ALPHABET, ALPHABET_SIZE, CipherError, ErrorKind, ModAlphaCipher

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "CipherError",
    "ErrorKind",
    "ModAlphaCipher",
]
