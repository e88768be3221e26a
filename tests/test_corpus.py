from __future__ import annotations

import pytest

from mini_fuzzgen_py.core.corpus import Corpus
from mini_fuzzgen_py.inputs import BytesInput


def test_ids_start_at_one_and_increase() -> None:
    corpus = Corpus()
    assert corpus.add(BytesInput(b"a")) == 1
    assert corpus.add(BytesInput(b"b")) == 2
    assert corpus.ids() == [1, 2]
    assert len(corpus) == 2
    assert 2 in corpus and 3 not in corpus
    assert corpus.get(1).bytes() == b"a"
    assert [i.bytes() for i in corpus] == [b"a", b"b"]


def test_get_missing_and_bad_type() -> None:
    corpus = Corpus()
    with pytest.raises(KeyError):
        corpus.get(1)
    with pytest.raises(TypeError):
        corpus.add(b"raw")


def test_dump_writes_each_content_once(tmp_path) -> None:
    corpus = Corpus()
    corpus.add(BytesInput(b"same"))
    corpus.add(BytesInput(b"same"))
    corpus.add(BytesInput(b"other"))
    written = corpus.dump_to_dir(tmp_path / "out")
    assert len(written) == 2
    assert {p.read_bytes() for p in written} == {b"same", b"other"}
    assert written[0].name == BytesInput(b"same").generate_name()


def test_load_dir(tmp_path) -> None:
    (tmp_path / "b").write_bytes(b"2")
    (tmp_path / "a").write_bytes(b"1")
    (tmp_path / "sub").mkdir()
    corpus = Corpus()
    assert corpus.load_dir(tmp_path) == [1, 2]
    assert [i.bytes() for i in corpus] == [b"1", b"2"]
    with pytest.raises(NotADirectoryError):
        corpus.load_dir(tmp_path / "missing")
