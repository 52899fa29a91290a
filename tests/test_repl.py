import io
import unittest

from src.services.repl_service import PROMPT, format_result, run_repl


def session(text: str, max_length: int = 100) -> list:
    out = io.StringIO()
    run_repl(io.StringIO(text), out, max_length)
    return [line for line in out.getvalue().splitlines() if line != PROMPT]


class TestRepl(unittest.TestCase):
    def test_results_and_exit(self) -> None:
        lines = session("2+2\n  10/4 \nexit\n3*3\n")
        self.assertEqual(lines, ["2+2 = 4", "10/4 = 2.5", "Bye"])

    def test_error_message(self) -> None:
        lines = session("1/0\nexit\n")
        self.assertEqual(lines, ['Calculation of "1/0" failed: division by zero', "Bye"])

    def test_blank_line(self) -> None:
        lines = session("\nexit\n")
        self.assertEqual(lines[0], 'Calculation of "" failed: expression is empty')

    def test_end_of_input_stops(self) -> None:
        self.assertEqual(session("7"), ["7 = 7"])

    def test_exit_is_exact(self) -> None:
        lines = session("exit now\n")
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith('Calculation of "exit now" failed: invalid character'))

    def test_too_long(self) -> None:
        lines = session("1+1+1\n", max_length=3)
        self.assertEqual(lines, ["Expression is too long (limit 3 characters)"])

    def test_prompt_printed_per_line(self) -> None:
        out = io.StringIO()
        run_repl(io.StringIO("1\n2\n"), out, 100)
        self.assertEqual(out.getvalue().count(PROMPT), 3)


class TestFormatResult(unittest.TestCase):
    def test_integral(self) -> None:
        self.assertEqual(format_result(4.0), "4")
        self.assertEqual(format_result(-5.0), "-5")

    def test_fractional(self) -> None:
        self.assertEqual(format_result(0.25), "0.25")

    def test_large(self) -> None:
        self.assertEqual(format_result(1e20), "1e+20")


if __name__ == "__main__":
    unittest.main()
