import threading
import unittest

from b91 import (
	Alphabet,
	CharsetRegistry,
	DEFAULT_ALPHABET,
	ConfigError,
	CharsetLengthError,
	CharsetDuplicateError,
	InvalidSymbolError,
	UnknownCharsetError,
)
from b91.constants import DEFAULT_CHARSET


class TestAlphabet(unittest.TestCase):
	def test_default_is_bijective(self):
		self.assertEqual(len(DEFAULT_ALPHABET), 91)
		self.assertEqual(len(set(DEFAULT_ALPHABET)), 91)
		for i, ch in enumerate(DEFAULT_ALPHABET):
			self.assertEqual(DEFAULT_ALPHABET[i], ch)
			self.assertEqual(DEFAULT_ALPHABET.index(ch), i)

	def test_default_order(self):
		self.assertEqual(DEFAULT_ALPHABET[0], "A")
		self.assertEqual(DEFAULT_ALPHABET[26], "a")
		self.assertEqual(DEFAULT_ALPHABET[52], "0")
		self.assertEqual(DEFAULT_ALPHABET[62], "!")
		self.assertEqual(DEFAULT_ALPHABET[88], "}")
		self.assertEqual(DEFAULT_ALPHABET[89], "~")
		self.assertEqual(DEFAULT_ALPHABET[90], '"')

	def test_index_unknown_symbol(self):
		with self.assertRaises(InvalidSymbolError) as ctx:
			DEFAULT_ALPHABET.index("-")
		self.assertEqual(ctx.exception.symbol, "-")
		self.assertIsNone(ctx.exception.position)

	def test_contains(self):
		self.assertIn("A", DEFAULT_ALPHABET)
		self.assertNotIn("'", DEFAULT_ALPHABET)
		self.assertNotIn(" ", DEFAULT_ALPHABET)

	def test_wrong_length(self):
		with self.assertRaises(CharsetLengthError):
			Alphabet(DEFAULT_CHARSET[:-1])
		with self.assertRaises(CharsetLengthError):
			Alphabet(DEFAULT_CHARSET + "'")

	def test_duplicates(self):
		with self.assertRaises(CharsetDuplicateError):
			Alphabet(DEFAULT_CHARSET[:-1] + "A")

	def test_length_and_duplicates_are_config_errors(self):
		self.assertTrue(issubclass(CharsetLengthError, ConfigError))
		self.assertTrue(issubclass(CharsetDuplicateError, ConfigError))

	def test_whitespace_symbol(self):
		with self.assertRaises(ConfigError):
			Alphabet(DEFAULT_CHARSET[:-1] + " ")

	def test_list_and_tuple_input(self):
		self.assertEqual(Alphabet(list(DEFAULT_CHARSET)), DEFAULT_ALPHABET)
		self.assertEqual(Alphabet(tuple(DEFAULT_CHARSET)), DEFAULT_ALPHABET)

	def test_unordered_input_is_rejected(self):
		# a set iterates in hash order, which changes between processes
		with self.assertRaises(TypeError):
			Alphabet(set(DEFAULT_CHARSET))
		with self.assertRaises(TypeError):
			Alphabet(frozenset(DEFAULT_CHARSET))
		registry = CharsetRegistry()
		with self.assertRaises(TypeError):
			registry.add("unordered", set(DEFAULT_CHARSET[::-1]))
		self.assertNotIn("unordered", registry)

	def test_digits(self):
		self.assertEqual(DEFAULT_ALPHABET.digits("fPNKd"), [31, 15, 13, 10, 29])
		self.assertEqual(DEFAULT_ALPHABET.digits(""), [])
		with self.assertRaises(InvalidSymbolError) as ctx:
			DEFAULT_ALPHABET.digits("fP-K")
		self.assertEqual(ctx.exception.position, 2)

	def test_bad_entry_types(self):
		with self.assertRaises(TypeError):
			Alphabet(12345)
		with self.assertRaises(TypeError):
			Alphabet(["AB"] + list(DEFAULT_CHARSET[2:]))

	def test_equality_and_hash(self):
		other = Alphabet(DEFAULT_CHARSET)
		self.assertEqual(other, DEFAULT_ALPHABET)
		self.assertEqual(hash(other), hash(DEFAULT_ALPHABET))
		self.assertEqual(str(other), DEFAULT_CHARSET)
		self.assertNotEqual(Alphabet(DEFAULT_CHARSET[::-1]), DEFAULT_ALPHABET)

	def test_values_is_a_copy(self):
		values = DEFAULT_ALPHABET.values
		values["A"] = 90
		self.assertEqual(DEFAULT_ALPHABET.index("A"), 0)


class TestCharsetRegistry(unittest.TestCase):
	def test_default_entry(self):
		registry = CharsetRegistry()
		self.assertEqual(registry.default, "default")
		self.assertIs(registry.get(), DEFAULT_ALPHABET)
		self.assertIs(registry.get("default"), DEFAULT_ALPHABET)
		self.assertEqual(registry.names(), ["default"])

	def test_add_and_get(self):
		registry = CharsetRegistry()
		with self.assertLogs("b91.alphabet", level="INFO") as logs:
			added = registry.add("Reversed", DEFAULT_CHARSET[::-1])
		self.assertIn("reversed", logs.output[0])
		self.assertIs(registry.get("reversed"), added)
		self.assertIs(registry.get("REVERSED"), added)
		self.assertIn("Reversed", registry)
		self.assertEqual(len(registry), 2)

	def test_replace_existing(self):
		registry = CharsetRegistry()
		registry.add("custom", DEFAULT_CHARSET[::-1])
		with self.assertLogs("b91.alphabet", level="INFO") as logs:
			registry.add("custom", DEFAULT_CHARSET)
		self.assertIn("replaced", logs.output[0])
		self.assertEqual(registry.get("custom"), DEFAULT_ALPHABET)

	def test_add_validates(self):
		registry = CharsetRegistry()
		with self.assertRaises(CharsetDuplicateError):
			registry.add("bad", DEFAULT_CHARSET[:-1] + "A")
		with self.assertRaises(TypeError):
			registry.add(42, DEFAULT_CHARSET)
		self.assertNotIn("bad", registry)

	def test_unknown_name(self):
		registry = CharsetRegistry()
		with self.assertRaises(UnknownCharsetError) as ctx:
			registry.get("nope")
		self.assertIn("'default'", str(ctx.exception))
		with self.assertRaises(UnknownCharsetError):
			registry.set_default("nope")

	def test_set_default(self):
		registry = CharsetRegistry()
		registry.add("reversed", DEFAULT_CHARSET[::-1])
		registry.set_default("Reversed")
		self.assertEqual(registry.default, "reversed")
		self.assertEqual(registry.get(), Alphabet(DEFAULT_CHARSET[::-1]))

	def test_concurrent_adds(self):
		registry = CharsetRegistry()
		rotations = [DEFAULT_CHARSET[i:] + DEFAULT_CHARSET[:i] for i in range(1, 21)]

		def worker(i: int) -> None:
			registry.add(f"rot{i}", rotations[i - 1])

		threads = [threading.Thread(target=worker, args=(i,)) for i in range(1, 21)]
		for t in threads:
			t.start()
		for t in threads:
			t.join()

		self.assertEqual(len(registry), 21)
		self.assertEqual(str(registry.get("rot5")), rotations[4])


if __name__ == '__main__':
	unittest.main()
