"""Known-answer tests loaded from vectors.yml."""

import unittest
from pathlib import Path

import yaml

from b32codec import Base32Type, decode, encode

VECTORS_FILE = Path(__file__).parent / "vectors.yml"


def load_vectors():
    with open(VECTORS_FILE, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


class TestKnownVectors(unittest.TestCase):
    """Each vector must encode and decode exactly."""

    @classmethod
    def setUpClass(cls):
        cls.vectors = load_vectors()

    def test_vectors_loaded(self):
        """The vector file covers every predefined alphabet."""
        names = {vector["alphabet"] for vector in self.vectors}
        self.assertEqual(names, {member.value for member in Base32Type})

    def test_encode(self):
        """encode() reproduces the expected text."""
        for vector in self.vectors:
            alphabet = Base32Type.from_name(vector["alphabet"]).alphabet
            data = bytes.fromhex(vector["hex"])
            with self.subTest(alphabet=alphabet.name, hex=vector["hex"]):
                self.assertEqual(encode(alphabet, data), vector["text"])

    def test_decode(self):
        """decode() recovers the original bytes."""
        for vector in self.vectors:
            alphabet = Base32Type.from_name(vector["alphabet"]).alphabet
            data = bytes.fromhex(vector["hex"])
            with self.subTest(alphabet=alphabet.name, text=vector["text"]):
                self.assertEqual(decode(alphabet, vector["text"]), data)

    def test_decode_without_padding(self):
        """Padded alphabets also accept the text with its padding removed."""
        for vector in self.vectors:
            alphabet = Base32Type.from_name(vector["alphabet"]).alphabet
            if not alphabet.padded:
                continue
            data = bytes.fromhex(vector["hex"])
            stripped = vector["text"].rstrip(alphabet.padding)
            with self.subTest(alphabet=alphabet.name, text=stripped):
                self.assertEqual(decode(alphabet, stripped), data)


if __name__ == "__main__":
    unittest.main()
