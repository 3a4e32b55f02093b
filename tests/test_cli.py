"""Tests for CLI helpers and the run() entry point."""

import io
import json

import pytest

from dfx_canister_counter.analyzer import Analysis, CanisterInfo
from dfx_canister_counter.errors import CounterError, IoError, ParseError, SchemaError
from dfx_canister_counter.cli import (
    EXIT_FAILURE,
    EXIT_IO,
    EXIT_OK,
    EXIT_PARSE,
    EXIT_SCHEMA,
    _exit_code,
    _show_canisters,
    _show_summary,
    render_report,
    run,
)


def _project(tmp_path, data):
    (tmp_path / "dfx.json").write_text(json.dumps(data), encoding="utf-8")
    return tmp_path


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    code = run(argv, dest=out, err=err)
    return code, out.getvalue(), err.getvalue()


# ---------------------------------------------------------------------------
# _show_canisters / _show_summary
# ---------------------------------------------------------------------------

def test_show_canisters():
    analysis = Analysis(total=1, by_type={"rust": 1}, canisters=(CanisterInfo("a", "rust"),))
    buf = io.StringIO()
    _show_canisters(analysis, buf)
    assert buf.getvalue() == "Canister: a, Type: rust\n"

def test_show_summary_sorted():
    analysis = Analysis(
        total=3,
        by_type={"rust": 2, "assets": 1},
        canisters=(
            CanisterInfo("a", "rust"),
            CanisterInfo("b", "rust"),
            CanisterInfo("c", "assets"),
        ),
    )
    buf = io.StringIO()
    _show_summary(analysis, buf)
    out = buf.getvalue()
    assert "Total number of canisters: 3" in out
    assert out.index("assets: 1") < out.index("rust: 2")

def test_show_summary_empty():
    buf = io.StringIO()
    _show_summary(Analysis(), buf)
    assert "Total number of canisters: 0" in buf.getvalue()
    assert "no canisters defined" in buf.getvalue()

def test_render_report_quiet():
    analysis = Analysis(total=1, by_type={"rust": 1}, canisters=(CanisterInfo("a", "rust"),))
    buf = io.StringIO()
    render_report(analysis, buf, quiet=True)
    assert "Canister: a" not in buf.getvalue()
    assert "rust: 1" in buf.getvalue()


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------

def test_run_success(tmp_path):
    _project(tmp_path, {"canisters": {"a": {"type": "rust"}, "b": {"type": "rust"}, "c": {}}})
    code, out, err = _run(["--path", str(tmp_path)])
    assert code == EXIT_OK
    assert "Canister: a, Type: rust" in out
    assert "Canister: c, Type: unspecified" in out
    assert "Total number of canisters: 3" in out
    assert "  rust: 2" in out
    assert "  unspecified: 1" in out
    assert err == ""

def test_run_path_to_file(tmp_path):
    f = tmp_path / "custom.json"
    f.write_text('{"canisters": {"x": {"type": "motoko"}}}', encoding="utf-8")
    code, out, _ = _run(["-p", str(f)])
    assert code == EXIT_OK
    assert "motoko: 1" in out

def test_run_default_path_is_cwd(tmp_path, monkeypatch):
    _project(tmp_path, {"canisters": {"a": {}}})
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DFX_COUNTER_PATH", raising=False)
    code, out, _ = _run([])
    assert code == EXIT_OK
    assert "Total number of canisters: 1" in out

def test_run_path_from_env(tmp_path, monkeypatch):
    _project(tmp_path, {"canisters": {"a": {"type": "pull"}}})
    monkeypatch.setenv("DFX_COUNTER_PATH", str(tmp_path))
    code, out, _ = _run([])
    assert code == EXIT_OK
    assert "pull: 1" in out

def test_run_empty_project(tmp_path):
    _project(tmp_path, {})
    code, out, _ = _run(["-p", str(tmp_path)])
    assert code == EXIT_OK
    assert "Total number of canisters: 0" in out

def test_run_missing_file(tmp_path):
    code, out, err = _run(["-p", str(tmp_path)])
    assert code == EXIT_IO
    assert out == ""
    assert err.startswith("error: could not read")

def test_run_parse_error(tmp_path):
    (tmp_path / "dfx.json").write_text("{not json", encoding="utf-8")
    code, _, err = _run(["-p", str(tmp_path)])
    assert code == EXIT_PARSE
    assert "failed to parse" in err

def test_run_deeply_nested(tmp_path):
    depth = 100_000
    (tmp_path / "dfx.json").write_text("[" * depth + "]" * depth, encoding="utf-8")
    code, out, err = _run(["-p", str(tmp_path)])
    assert code == EXIT_PARSE
    assert out == ""
    assert "nested too deeply" in err

def test_run_schema_error(tmp_path):
    _project(tmp_path, {"canisters": {"a": {"type": 5}}})
    code, out, err = _run(["-p", str(tmp_path)])
    assert code == EXIT_SCHEMA
    assert out == ""
    assert "canisters.a.type" in err

def test_exit_code_mapping():
    assert _exit_code(IoError("dfx.json", "denied")) == EXIT_IO
    assert _exit_code(ParseError("dfx.json", "bad")) == EXIT_PARSE
    assert _exit_code(SchemaError("canisters", "bad")) == EXIT_SCHEMA

def test_exit_code_other_counter_error():
    class NetworkError(CounterError):
        pass

    assert _exit_code(CounterError("boom")) == EXIT_FAILURE
    assert _exit_code(NetworkError("boom")) == EXIT_FAILURE

def test_log_level_case_insensitive(tmp_path):
    _project(tmp_path, {})
    code, _, _ = _run(["-p", str(tmp_path), "--log-level", "error"])
    assert code == EXIT_OK

def test_log_level_unknown_rejected(tmp_path, capsys):
    _project(tmp_path, {})
    with pytest.raises(SystemExit) as info:
        run(["-p", str(tmp_path), "--log-level", "chatty"])
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err

def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        run(["--version"])
    assert info.value.code == 0
    assert "dfx-canister-counter" in capsys.readouterr().out
