import logging
from pathlib import Path
from typing import Iterator

import pytest
from simargs.logger import logger
from simargs.main import main, cli, cli_args, InvalidParameter
from simargs.params import SimParams


@pytest.fixture(autouse=True)
def restore_log_level() -> Iterator[None]:
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "p.txt").write_text("")
    (tmp_path / "pre.txt").write_text("")
    (tmp_path / "out").mkdir()
    return tmp_path


def test_all_options(workdir: Path) -> None:
    params = SimParams()
    argv = ["sim", "/P", "p.txt", "/O", "out/run", "/PP:pre.txt", "/C", "4",
            "/NR", "10", "/S", "98798150", "/R", "-3", "/L", "debug"]
    assert cli_args(params).parse(argv, params) == 0
    assert params == SimParams(
        param_file="p.txt",
        pre_param_file="pre.txt",
        output_prefix="out/run",
        num_threads=4,
        num_realisations=10,
        setup_seed=98798150,
        run_seed=-3,
        log_level=logging.DEBUG,
    )


def test_main_succeeds(workdir: Path) -> None:
    assert main(["sim", "/P", "p.txt", "/O", "out/run", "/L", "info"]) == 0
    assert logger.level == logging.INFO


def test_main_requires_param_and_output(workdir: Path) -> None:
    assert main(["sim", "/P", "p.txt"]) != 0
    assert main(["sim", "/O", "out/run"]) != 0


def test_main_rejects_zero_threads(workdir: Path) -> None:
    with pytest.raises(InvalidParameter) as info:
        main(["sim", "/P", "p.txt", "/O", "out/run", "/C", "0"])
    assert "/C" in info.value.message


def test_cli_exit_codes(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["sim", "/P", "p.txt", "/O", "out/run"])
    with pytest.raises(SystemExit) as info:
        cli()
    assert info.value.code == 0

    monkeypatch.setattr("sys.argv", ["sim", "/P", "p.txt", "/O", "out/run", "/NR", "-1"])
    with pytest.raises(SystemExit) as info:
        cli()
    assert info.value.code == 1

    monkeypatch.setattr("sys.argv", ["sim", "/D", "missing.txt"])
    with pytest.raises(SystemExit) as info:
        cli()
    assert info.value.code == 1


def test_cli_help(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.argv", ["sim", "/H"])
    with pytest.raises(SystemExit) as info:
        cli()
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("Usage: sim")
