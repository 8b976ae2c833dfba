"""Unit tests for template filename sources."""

import io
import unittest

from vortex.backends import render_starter_template
from vortex.errors import ConflictingTemplateSources, UnterminatedQuote
from vortex.templates import body_lines, get_template_filenames


class FakeTerminal(io.StringIO):
    """A stdin that claims to be interactive."""

    def isatty(self):
        return True


class TestTemplateFilenames(unittest.TestCase):
    """Test collecting template filenames."""

    def test_arguments(self):
        """Test filenames given as arguments."""
        filenames = get_template_filenames(["a.ini", "b.ini!"], FakeTerminal())
        self.assertEqual(["a.ini", "b.ini!"], filenames)

    def test_terminal_is_not_read(self):
        """Test that an interactive stdin isn't consumed."""
        stdin = FakeTerminal("ignored.ini")
        self.assertEqual([], get_template_filenames([], stdin))
        self.assertEqual(0, stdin.tell())

    def test_piped(self):
        """Test filenames piped on stdin."""
        stdin = io.StringIO('a.ini "my file.ini"\nc.ini\n')
        filenames = get_template_filenames([], stdin)
        self.assertEqual(["a.ini", "my file.ini", "c.ini"], filenames)

    def test_empty_pipe_keeps_arguments(self):
        """Test that an empty pipe doesn't conflict with arguments."""
        filenames = get_template_filenames(["a.ini"], io.StringIO("  \n"))
        self.assertEqual(["a.ini"], filenames)

    def test_both_sources(self):
        """Test that giving filenames both ways is an error."""
        with self.assertRaises(ConflictingTemplateSources):
            get_template_filenames(["a.ini"], io.StringIO("b.ini"))

    def test_piped_unterminated_quote(self):
        """Test that lexer errors are passed through."""
        with self.assertRaises(UnterminatedQuote):
            get_template_filenames([], io.StringIO('"a.ini'))

    def test_fresh_list(self):
        """Test that results don't accumulate across calls."""
        args = ["a.ini"]
        first = get_template_filenames(args, FakeTerminal())
        first.append("extra.ini")
        self.assertEqual(["a.ini"], get_template_filenames(args, FakeTerminal()))
        self.assertEqual(["a.ini"], args)


class TestBodyLines(unittest.TestCase):
    """Test extracting the body section of a template."""

    def test_body_section(self):
        """Test that only body lines are returned."""
        text = (
            "[Host]\n"
            "http://localhost:8080\n"
            "\n"
            "[Body]\n"
            "# a comment\n"
            "{\n"
            '  "key": "value"\n'
            "}\n"
            "\n"
            "[Backend]\n"
            "curl\n"
        )
        self.assertEqual(["{", '  "key": "value"', "}"], body_lines(text))

    def test_json_array_body(self):
        """Test that a bracketed JSON body isn't taken for a section header."""
        text = '[Host]\nhttp://x\n\n[Body]\n["a", "b"]\n\n[Backend]\ncurl\n'
        self.assertEqual(['["a", "b"]'], body_lines(text))

    def test_no_body(self):
        """Test templates without a body section."""
        self.assertEqual([], body_lines("[Host]\nhttp://localhost\n"))

    def test_starter_template_body_is_commented(self):
        """Test that the starter template has no active body."""
        self.assertEqual([], body_lines(render_starter_template()))


if __name__ == "__main__":
    unittest.main()
