import pytest

from rejson_handler import __version__
from rejson_handler.__main__ import main


def test_main_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_main_without_arguments_is_noop() -> None:
    main([])
