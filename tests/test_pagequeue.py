import pytest

from lrusim.pagequeue import PageQueue


def test_first_access_is_miss():
    pq = PageQueue(4)
    assert pq.access(10) == -1
    assert len(pq) == 1


def test_immediate_reuse_has_depth_zero():
    pq = PageQueue(4)
    pq.access(5)
    assert pq.access(5) == 0


def test_depth_counts_from_mru_end():
    pq = PageQueue(4)
    for page in (1, 2, 3):
        pq.access(page)
    assert pq.access(1) == 2
    assert list(pq) == [2, 3, 1]


def test_hit_moves_page_to_tail():
    pq = PageQueue(3)
    for page in (1, 2, 3):
        pq.access(page)
    pq.access(2)
    assert list(pq) == [1, 3, 2]
    assert pq.access(1) == 2


def test_eviction_removes_lru():
    pq = PageQueue(2)
    pq.access(1)
    pq.access(2)
    pq.access(3)
    assert list(pq) == [2, 3]
    assert pq.access(1) == -1
    assert list(pq) == [3, 1]


def test_size_never_exceeds_capacity():
    pq = PageQueue(3)
    for page in range(20):
        pq.access(page % 7)
        assert len(pq) <= 3


def test_zero_capacity_always_faults():
    pq = PageQueue(0)
    assert pq.access(1) == -1
    assert pq.access(1) == -1
    assert len(pq) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PageQueue(-1)


def test_format_lists_lru_to_mru():
    pq = PageQueue(5)
    for page in (4, 8, 15):
        pq.access(page)
    pq.access(4)
    assert pq.format() == "8 15 4"


def test_format_empty():
    assert PageQueue(3).format() == ""