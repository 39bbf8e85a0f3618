import json

import pytest

from roomlayout.config import EditorConfig
from roomlayout.core.model import Room
from roomlayout.engine.editor import Editor
from roomlayout.engine.session import EditorSession


@pytest.fixture
def config():
    return EditorConfig()


@pytest.fixture
def room_a():
    return Room(x=0, y=0, width=200, height=100)


@pytest.fixture
def editor(config):
    return Editor(config)


@pytest.fixture
def editor_with_room(editor):
    anchor = editor.begin_room(5, 5)
    assert editor.commit_room(editor.update_room(anchor, 205, 105))
    return editor


@pytest.fixture
def session(editor):
    return EditorSession(editor)


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
