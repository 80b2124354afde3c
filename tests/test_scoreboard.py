from towerengine.scoreboard import ScoreBoard, ScoreEntry


def test_missing_file_reads_empty(tmp_path):
    board = ScoreBoard(tmp_path / "none.txt")
    assert board.read() == []


def test_write_then_read_round_trip(tmp_path):
    board = ScoreBoard(tmp_path / "scores.txt")
    board.write(["100", "12:30", "alice"])
    board.write(["250", "01:05", "bob"])
    assert board.read() == [
        ScoreEntry(100, "12:30", "alice"),
        ScoreEntry(250, "01:05", "bob"),
    ]


def test_write_prefixes_each_field_with_space(tmp_path):
    path = tmp_path / "scores.txt"
    ScoreBoard(path).write(["7", "t", "n"])
    assert path.read_text() == " 7 t n"


def test_sort_descending_by_default(tmp_path, capsys):
    path = tmp_path / "scores.txt"
    board = ScoreBoard(path)
    for score, name in [("5", "a"), ("30", "b"), ("12", "c")]:
        board.write([score, "00:00", name])
    board.sort()
    scores = [e.score for e in board.read()]
    assert scores == sorted(scores, reverse=True)
    assert path.read_text().splitlines()[0] == "30 00:00 b"
    assert capsys.readouterr().out.splitlines()[0] == "5 00:00 a"


def test_sort_ascending(tmp_path):
    board = ScoreBoard(tmp_path / "scores.txt")
    for score in ["9", "-3", "4"]:
        board.write([score, "x", "p"])
    board.sort(False)
    entries = board.read()
    assert [e.score for e in entries] == sorted(e.score for e in entries)
    assert len(entries) == 3


def test_read_stops_at_malformed_record(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("10 t a\nbad t b\n20 t c\n")
    assert ScoreBoard(path).read() == [ScoreEntry(10, "t", "a")]


def test_read_ignores_incomplete_trailing_record(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("10 t a 20 t")
    assert ScoreBoard(path).read() == [ScoreEntry(10, "t", "a")]