from slowperipheral.fragmenter import fragment_payload
from slowperipheral.packet import MAX_DATA_SIZE, SlowFlags


def test_source_case_large_payload():
    frags = fragment_payload(bytes(16), 30000, 1, 4096, b"X" * 4000)
    assert len(frags) >= 3
    assert frags[0].flags & SlowFlags.MB


def test_fragment_shapes():
    frags = fragment_payload(bytes(16), 30000, 1, 4096, b"X" * 4000)
    assert [len(f.data) for f in frags] == [1440, 1440, 1120]
    assert [f.seqnum for f in frags] == [1, 2, 3]
    assert [f.fo for f in frags] == [0, 1, 2]
    assert len({f.fid for f in frags}) == 1
    assert frags[-1].flags == SlowFlags.ACK
    assert all(f.flags == SlowFlags.ACK | SlowFlags.MB for f in frags[:-1])


def test_reassembly_restores_payload():
    payload = bytes(i % 251 for i in range(5000))
    frags = fragment_payload(bytes(16), 10, 0, 100, payload)
    assert b"".join(f.data for f in frags) == payload
    assert all(len(f.data) <= MAX_DATA_SIZE for f in frags)


def test_single_small_payload():
    sid = bytes(range(16))
    frags = fragment_payload(sid, 30000, 5, 4096, b"Hello")
    assert len(frags) == 1
    assert frags[0].sid == sid
    assert frags[0].sttl == 30000
    assert frags[0].window == 4096
    assert frags[0].flags == SlowFlags.ACK


def test_empty_payload_gives_no_fragments():
    assert fragment_payload(bytes(16), 0, 0, 0, b"") == []