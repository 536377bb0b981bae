import unittest

from lexer import tokenize


class TestTokenize(unittest.TestCase):
    def test_splits_on_whitespace(self):
        self.assertEqual(["ls", "-l", "/tmp"], tokenize("ls -l /tmp"))

    def test_collapses_runs_of_spaces_and_tabs(self):
        self.assertEqual(["echo", "a", "b"], tokenize("  echo \t a    b  "))

    def test_blank_line_is_empty(self):
        self.assertEqual([], tokenize(""))
        self.assertEqual([], tokenize("   \t "))

    def test_operators_must_stand_alone(self):
        # no operator splitting: ls>out is a single word
        self.assertEqual(["ls>out"], tokenize("ls>out"))
        self.assertEqual(["ls", ">", "out"], tokenize("ls > out"))

    def test_no_quoting(self):
        self.assertEqual(['"a', 'b"'], tokenize('"a b"'))

    def test_at_limit_is_accepted(self):
        line = " ".join(["w"] * 10)
        self.assertEqual(10, len(tokenize(line)))

    def test_too_many_arguments_raises(self):
        line = " ".join(["w"] * 11)
        with self.assertRaises(SyntaxError) as cm:
            tokenize(line)
        self.assertIn("too many arguments", str(cm.exception))

    def test_custom_limit(self):
        with self.assertRaises(SyntaxError):
            tokenize("a b c", max_args=2)
        self.assertEqual(["a", "b"], tokenize("a b", max_args=2))


if __name__ == "__main__":
    unittest.main()
