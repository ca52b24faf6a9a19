import io
import json
from datetime import datetime

import pytest

from sandbox_apps.todo import Todo, load_tasks, main, save_tasks


def test_new_todo_is_not_completed():
    todo = Todo("write tests")
    assert todo.completed is False
    todo.mark_completed()
    assert todo.completed is True


def test_to_dict_fields():
    moment = datetime.fromtimestamp(1_700_000_000).astimezone()
    todo = Todo("buy milk", created_at=moment)
    assert todo.to_dict() == {
        "created_at": 1_700_000_000,
        "description": "buy milk",
        "completed": False,
    }


def test_dict_round_trip():
    todo = Todo("buy milk", completed=True)
    restored = Todo.from_dict(todo.to_dict())
    assert restored.description == todo.description
    assert restored.completed is True
    assert restored.to_dict() == todo.to_dict()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"description": "x", "completed": False},
        {"created_at": "soon", "description": "x", "completed": False},
        {"created_at": True, "description": "x", "completed": False},
        {"created_at": 1, "description": 5, "completed": False},
        {"created_at": 1, "description": "x", "completed": "no"},
    ],
)
def test_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        Todo.from_dict(data)


def test_format_line():
    moment = datetime(2024, 5, 6, 7, 8, 9).astimezone()
    todo = Todo("walk", created_at=moment)
    assert todo.format_line(1) == "1. [ ] walk : 2024-05-06 07:08:09"
    todo.mark_completed()
    assert todo.format_line(3).startswith("3. [X] walk : ")


def test_save_and_load(tmp_path):
    path = tmp_path / "todos.json"
    todos = [Todo("a"), Todo("b", completed=True)]
    save_tasks(todos, path)
    loaded = load_tasks(path)
    assert [t.to_dict() for t in loaded] == [t.to_dict() for t in todos]
    assert isinstance(json.loads(path.read_text()), list)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(tmp_path / "absent.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_tasks(path)


def test_load_non_list(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text('{"a": 1}')
    with pytest.raises(ValueError):
        load_tasks(path)


def _run(monkeypatch, capsys, path, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["--file", str(path)]) == 0
    return capsys.readouterr().out


def test_main_add_mark_save(monkeypatch, capsys, tmp_path):
    path = tmp_path / "todos.json"
    out = _run(monkeypatch, capsys, path, "1\nfeed cat\n3\n1\n2\n4\n5\n")
    assert "No previous tasks found. Starting fresh." in out
    assert "Task added!" in out
    assert "Task marked successfully!" in out
    assert "1. [X] feed cat : " in out
    assert "Tasks saved!" in out
    assert "Goodbye!" in out
    saved = load_tasks(path)
    assert [(t.description, t.completed) for t in saved] == [("feed cat", True)]


def test_main_empty_list_and_bad_choice(monkeypatch, capsys, tmp_path):
    out = _run(monkeypatch, capsys, tmp_path / "todos.json", "2\n9\n5\n")
    assert "No tasks are available!" in out
    assert "Invalid choice! Try again." in out


def test_main_invalid_task_numbers(monkeypatch, capsys, tmp_path):
    out = _run(monkeypatch, capsys, tmp_path / "todos.json", "1\nx\n3\n7\n3\nabc\n5\n")
    assert "Invalid Task Number! Please choose a number between 1 and 1." in out
    assert "Invalid Input! Please enter a number." in out


def test_main_corrupt_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "todos.json"
    path.write_text("garbage")
    out = _run(monkeypatch, capsys, path, "5\n")
    assert "Failed to parse tasks. Starting with an empty list." in out