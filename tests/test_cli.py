import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from lightsout_core.cli import main, _parse_move


class TestCli(unittest.TestCase):
    def _run(self, argv, lines):
        out = io.StringIO()
        with patch('builtins.input', side_effect=list(lines)), redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_given_move_forms_when_parsing_then_same_coord(self):
        self.assertEqual(_parse_move('1 2'), (1, 2))
        self.assertEqual(_parse_move('1,2'), (1, 2))
        self.assertEqual(_parse_move('1-2'), (1, 2))
        with self.assertRaises(ValueError):
            _parse_move('1 2 3')

    def test_given_single_press_puzzle_when_played_then_you_won_printed(self):
        # A 1x1 board that starts lit is solved by pressing its only cell
        text = self._run(['--rows', '1', '--cols', '1', '--chance', '1.0'], ['0 0', 'q'])
        self.assertIn('O', text)
        self.assertIn('You Won!', text)

    def test_given_bad_input_when_played_then_prompts_again(self):
        text = self._run(['--rows', '2', '--cols', '2', '--chance', '0.0'], ['zz', '9 9', 'q'])
        self.assertIn('Could not parse', text)
        self.assertIn('not on the board', text)

    def test_given_eof_when_playing_then_exits_cleanly(self):
        self._run(['--seed', '3'], [EOFError()])

    def test_given_new_game_command_when_played_then_board_redealt(self):
        text = self._run(['--rows', '2', '--cols', '2', '--chance', '0.0'], ['n', 'q'])
        self.assertEqual(text.count('You Won!'), 2)

    def test_given_invalid_config_when_starting_then_exits_with_usage_error(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), patch('sys.stderr', new_callable=io.StringIO):
                main(['--rows', '0'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
