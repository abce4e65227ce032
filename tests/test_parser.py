"""Tests for line tokenizing."""

from msh.parser import Stage, has_pipe, parse_pipeline, split_command


class TestSplitCommand:

    def test_name_and_arguments(self) -> None:
        assert split_command("echo a b") == ("echo", ["a", "b"])

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        assert split_command("  pwd  ") == ("pwd", [])

    def test_doubled_spaces_keep_empty_arguments(self) -> None:
        """Splitting is on a literal space, so runs of spaces are not merged."""
        assert split_command("echo  a") == ("echo", ["", "a"])

    def test_quotes_are_not_special(self) -> None:
        assert split_command('echo "a b"') == ("echo", ['"a', 'b"'])


class TestParsePipeline:

    def test_detects_pipe(self) -> None:
        assert has_pipe("ls | wc")
        assert not has_pipe("ls -l")

    def test_stages_in_order(self) -> None:
        stages = parse_pipeline("ls -l | grep py | wc -l")
        assert [s.argv for s in stages] == [
            ["ls", "-l"], ["grep", "py"], ["wc", "-l"],
        ]

    def test_stage_padding_is_trimmed(self) -> None:
        stages = parse_pipeline("  echo hi|grep h  ")
        assert stages == [Stage("echo", ["hi"]), Stage("grep", ["h"])]

    def test_stages_start_without_process(self) -> None:
        assert all(s.process is None for s in parse_pipeline("a | b"))

    def test_empty_stage(self) -> None:
        stages = parse_pipeline("a || b")
        assert stages[1].program_name == ""
