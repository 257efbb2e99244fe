"""Tests for redirections.

Key areas: > and >> for builtins and external programs, 1> and 2>
forms, last redirection wins, interleaved arguments, open failures
"""

import pytest
from just_shell import Shell

PRINT_ARGS = '#!/bin/sh\nfor a in "$@"; do printf "[%s]\\n" "$a"; done\n'
WARN = '#!/bin/sh\necho "out:$1"\necho "err:$1" >&2\n'


@pytest.fixture
def shell(tmp_path, workdir, make_executable):
    """A shell whose PATH holds small test programs plus the system dirs."""
    bin_dir = tmp_path / "bin"
    make_executable(bin_dir, "printargs", PRINT_ARGS)
    make_executable(bin_dir, "warn", WARN)
    return Shell(env={"PATH": f"{bin_dir}:/usr/bin:/bin", "HOME": str(tmp_path)})


class TestBasicRedirects:
    """Basic redirection operations."""

    @pytest.mark.asyncio
    async def test_redirect_stdout_to_file(self, shell, workdir, capfd):
        """Redirect stdout to file with >."""
        result = await shell.exec('echo "hello" > output.txt')
        assert result.exit_code == 0
        assert (workdir / "output.txt").read_text() == "hello\n"
        assert capfd.readouterr().out == ""

    @pytest.mark.asyncio
    async def test_redirect_truncates(self, shell, workdir):
        """Running a > redirection twice leaves only the second output."""
        await shell.exec("echo first > output.txt")
        await shell.exec("echo second > output.txt")
        assert (workdir / "output.txt").read_text() == "second\n"

    @pytest.mark.asyncio
    async def test_redirect_append(self, shell, workdir):
        """Redirect append with >>."""
        (workdir / "output.txt").write_text("first\n")
        await shell.exec("echo second >> output.txt")
        await shell.exec("echo third 1>> output.txt")
        assert (workdir / "output.txt").read_text() == "first\nsecond\nthird\n"

    @pytest.mark.asyncio
    async def test_append_creates_file(self, shell, workdir):
        await shell.exec("echo new >> created.txt")
        assert (workdir / "created.txt").read_text() == "new\n"

    @pytest.mark.asyncio
    async def test_explicit_fd_one(self, shell, workdir):
        await shell.exec("echo hi 1> output.txt")
        assert (workdir / "output.txt").read_text() == "hi\n"

    @pytest.mark.asyncio
    async def test_redirect_stderr_to_file(self, shell, workdir, capfd):
        """Redirect stderr to file with 2>."""
        await shell.exec("cd /nonexistent 2> error.txt")
        assert "No such file or directory" in (workdir / "error.txt").read_text()
        assert capfd.readouterr().err == ""

    @pytest.mark.asyncio
    async def test_redirect_stderr_append(self, shell, workdir):
        await shell.exec("type missing_one 2>> error.txt")
        await shell.exec("type missing_two 2>> error.txt")
        assert (workdir / "error.txt").read_text() == (
            "missing_one: not found\nmissing_two: not found\n"
        )

    @pytest.mark.asyncio
    async def test_stderr_redirect_leaves_stdout(self, shell, workdir, capfd):
        await shell.exec("echo visible 2> error.txt")
        assert capfd.readouterr().out == "visible\n"
        assert (workdir / "error.txt").read_text() == ""

    @pytest.mark.asyncio
    async def test_type_and_pwd_honor_redirect(self, shell, workdir):
        await shell.exec("type echo > type.txt")
        await shell.exec("pwd > pwd.txt")
        assert (workdir / "type.txt").read_text() == "echo is a shell builtin\n"
        assert (workdir / "pwd.txt").read_text().strip() == str(workdir.resolve())


class TestExternalRedirects:
    """Redirections attach to child processes."""

    @pytest.mark.asyncio
    async def test_external_stdout(self, shell, workdir, capfd):
        await shell.exec("printargs a 'b c' > out.txt")
        assert (workdir / "out.txt").read_text() == "[a]\n[b c]\n"
        assert capfd.readouterr().out == ""

    @pytest.mark.asyncio
    async def test_external_append_twice(self, shell, workdir):
        await shell.exec("printargs one >> out.txt")
        await shell.exec("printargs two >> out.txt")
        assert (workdir / "out.txt").read_text() == "[one]\n[two]\n"

    @pytest.mark.asyncio
    async def test_external_split_streams(self, shell, workdir):
        await shell.exec("warn x > out.txt 2> err.txt")
        assert (workdir / "out.txt").read_text() == "out:x\n"
        assert (workdir / "err.txt").read_text() == "err:x\n"

    @pytest.mark.asyncio
    async def test_external_stderr_only(self, shell, workdir, capfd):
        await shell.exec("warn y 2>> err.txt")
        captured = capfd.readouterr()
        assert captured.out == "out:y\n"
        assert captured.err == ""
        assert (workdir / "err.txt").read_text() == "err:y\n"

    @pytest.mark.asyncio
    async def test_command_not_found_goes_to_redirected_stderr(self, shell, workdir, capfd):
        result = await shell.exec("nonexistent_xyz 2> err.txt")
        assert result.exit_code == 127
        assert (workdir / "err.txt").read_text() == "nonexistent_xyz: command not found\n"
        assert capfd.readouterr().err == ""


class TestRedirectPlacement:
    """Operators may appear anywhere and the last one wins."""

    @pytest.mark.asyncio
    async def test_redirect_before_arguments(self, shell, workdir):
        await shell.exec("printargs > out.txt extra_arg")
        assert (workdir / "out.txt").read_text() == "[extra_arg]\n"

    @pytest.mark.asyncio
    async def test_redirect_at_start(self, shell, workdir):
        await shell.exec("> out.txt echo hi")
        assert (workdir / "out.txt").read_text() == "hi\n"

    @pytest.mark.asyncio
    async def test_last_redirect_wins(self, shell, workdir):
        await shell.exec("echo hi > first.txt > second.txt")
        assert (workdir / "second.txt").read_text() == "hi\n"
        assert not (workdir / "first.txt").exists()

    @pytest.mark.asyncio
    async def test_operators_not_passed_as_arguments(self, shell, workdir):
        await shell.exec("printargs a > out.txt b 2> err.txt c")
        assert (workdir / "out.txt").read_text() == "[a]\n[b]\n[c]\n"

    @pytest.mark.asyncio
    async def test_dangling_operator_is_argument(self, shell, capfd):
        await shell.exec("echo hi >")
        assert capfd.readouterr().out == "hi >\n"

    @pytest.mark.asyncio
    async def test_quoted_filename(self, shell, workdir):
        await shell.exec("echo hi > 'my file.txt'")
        assert (workdir / "my file.txt").read_text() == "hi\n"

    @pytest.mark.asyncio
    async def test_redirection_only_line_creates_file(self, shell, workdir):
        (workdir / "out.txt").write_text("old\n")
        result = await shell.exec("> out.txt")
        assert result.exit_code == 0
        assert (workdir / "out.txt").read_text() == ""


class TestRedirectFailures:
    """A target that cannot be opened aborts the command."""

    @pytest.mark.asyncio
    async def test_missing_directory(self, shell, workdir, capfd):
        result = await shell.exec("echo hi > missing/out.txt")
        captured = capfd.readouterr()
        assert result.exit_code == 1
        assert not result.exited
        assert captured.out == ""
        assert captured.err == "just-shell: missing/out.txt: No such file or directory\n"

    @pytest.mark.asyncio
    async def test_second_target_fails(self, shell, workdir, capfd):
        result = await shell.exec("printargs hi > out.txt 2> missing/err.txt")
        assert result.exit_code == 1
        assert (workdir / "out.txt").read_text() == ""
        assert "missing/err.txt" in capfd.readouterr().err

    @pytest.mark.asyncio
    async def test_target_is_directory(self, shell, workdir, capfd):
        (workdir / "adir").mkdir()
        result = await shell.exec("echo hi > adir")
        assert result.exit_code == 1
        assert "Is a directory" in capfd.readouterr().err

    @pytest.mark.asyncio
    async def test_session_continues(self, shell, workdir, capfd):
        await shell.exec("echo hi > missing/out.txt")
        result = await shell.exec("echo after")
        assert result.exit_code == 0
        assert capfd.readouterr().out == "after\n"
