"""Tests for the evaluation suite helpers."""

from bf_triple import test_suite as suite


def test_split_and_checks(tmp_path, capsys):
    path = tmp_path / "entries.txt"
    path.write_text("\n".join(f"bad-{i:03d}.example" for i in range(100)) + "\n\nbad-000.example\n")

    words = suite.load_unique_entries(str(path))
    assert len(words) == 100

    bloom, train, test = suite.build_split(words, capacity=100_003)
    assert len(train) == 80 and len(test) == 20
    assert bloom.count == 80

    assert suite.test_membership(bloom, train) == 0
    fpr = suite.test_false_positive_on_heldout(bloom, train, test)
    assert 0.0 <= fpr <= 1.0
    suite.show_properties(bloom, train)

    out = capsys.readouterr().out
    assert "Missing after insertion: 0" in out
    assert "Filter size (bits): 100003" in out


def test_synthetic_data_is_unique_and_sorted():
    words = suite.generate_synthetic_data(50)
    assert len(set(words)) == 50
    assert words == sorted(words)


def test_run_all_on_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(suite, "QUERY_TARGET", 50)
    path = tmp_path / "entries.txt"
    path.write_text("\n".join(f"host{i}.test" for i in range(60)) + "\n")

    assert suite.run_all(str(path)) == 0

    out = capsys.readouterr().out
    assert "TEST C: Collision analysis" in out
    assert "Variants tested:" in out
    assert "Performed 50 queries" in out
    assert "Test suite completed successfully!" in out
