import logging

from gridsnake.storage import JsonHighScoreStore, MemoryHighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert JsonHighScoreStore(tmp_path / "none.json").read_high_score() == 0


def test_write_then_read(tmp_path):
    store = JsonHighScoreStore(tmp_path / "scores" / "best.json")
    store.write_high_score(12)
    assert store.read_high_score() == 12
    assert JsonHighScoreStore(tmp_path / "scores" / "best.json").read_high_score() == 12


def test_corrupt_file_reads_zero_and_warns(tmp_path, caplog):
    path = tmp_path / "best.json"
    path.write_text("not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert JsonHighScoreStore(path).read_high_score() == 0
    assert "Could not read high score" in caplog.text


def test_unexpected_document_reads_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonHighScoreStore(path).read_high_score() == 0


def test_failed_write_is_logged_not_raised(tmp_path, caplog):
    # A directory cannot be written as a file.
    store = JsonHighScoreStore(tmp_path)
    with caplog.at_level(logging.WARNING):
        store.write_high_score(3)
    assert "Could not write high score" in caplog.text


def test_memory_store_counts_writes():
    store = MemoryHighScoreStore(4)
    assert store.read_high_score() == 4
    store.write_high_score(9)
    assert store.read_high_score() == 9
    assert store.writes == 1
