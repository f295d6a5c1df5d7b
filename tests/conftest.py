import importlib
import pytest
import sioframe


@pytest.fixture
def reload_json(monkeypatch):
    """ Yield a function that reloads sioframe.json with the requested
        backend; the default backend is restored afterwards.
    """

    def reload(backend):
        monkeypatch.setenv('SIOFRAME_JSON', backend)
        importlib.reload(sioframe.json)

    yield reload

    monkeypatch.delenv('SIOFRAME_JSON', raising=False)
    importlib.reload(sioframe.json)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
