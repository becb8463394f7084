from clausal.predicates import UnsupportedPredicateKind
from clausal.support import excepthook


def test_no_trace(capsys):
    exc = UnsupportedPredicateKind(object)
    excepthook.excepthook(UnsupportedPredicateKind, exc, None)
    assert capsys.readouterr().err == "unsupported predicate kind type: <class 'object'>\n"


def test_ipython(capsys):
    exc = UnsupportedPredicateKind(1)
    excepthook.ipython_excepthook(None, UnsupportedPredicateKind, exc, None)
    assert capsys.readouterr().err == 'unsupported predicate kind int: 1\n'


def test_other_exceptions_are_passed_on(monkeypatch):
    seen = []
    monkeypatch.setattr(excepthook, 'python_excepthook', lambda *args: seen.append(args))
    exc = ValueError('boom')
    excepthook.excepthook(ValueError, exc, None)
    assert seen == [(ValueError, exc, None)]
