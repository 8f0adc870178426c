import builtins
import main

def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda _msg="": next(it))

def test_action_tvm_future_value(monkeypatch, capsys):
    # calculate fv; n, rate, pv, pmt; no schedule
    _feed(monkeypatch, ["fv", "10", "5", "1000", "0", "n"])
    main.action_tvm()
    assert "1,628.89" in capsys.readouterr().out

def test_action_tvm_rate_with_comma_decimal(monkeypatch, capsys):
    _feed(monkeypatch, ["rate", "10", "1000,0", "0", "2000,00"])
    main.action_tvm()
    assert "7.1773%" in capsys.readouterr().out

def test_action_tvm_no_result(monkeypatch, capsys):
    _feed(monkeypatch, ["periods", "5", "1000", "0", "-500"])
    main.action_tvm()
    assert "No result" in capsys.readouterr().out

def test_action_inflation_defaults(monkeypatch, capsys):
    _feed(monkeypatch, ["", "", ""])
    main.action_inflation()
    assert "Purchasing power lost" in capsys.readouterr().out

def test_main_loop_handles_bad_input_and_exits(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "abc", "9", "0"])
    main.main()
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Invalid option." in out
    assert "Bye!" in out

def test_action_tvm_rate_warns_when_not_converged(monkeypatch, capsys):
    # calculate rate; n, pv, pmt, fv
    _feed(monkeypatch, ["rate", "10", "1000000", "2000", "-100"])
    main.action_tvm()
    out = capsys.readouterr().out
    assert "%" in out
    assert "did not converge" in out
