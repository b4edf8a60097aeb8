from dataknobs_bintree import LeafCounted, LeafRecord, OutlineRecord


def test_leaf_record_defaults():
    record = LeafRecord()
    assert record.leaf_count == 0
    assert record.is_leaf is False


def test_identity_equality():
    assert LeafRecord() != LeafRecord()
    record = OutlineRecord(name="a")
    assert record == record
    assert record != OutlineRecord(name="a")


def test_protocol():
    class Plain:
        def __init__(self):
            self.leaf_count = 0
            self.is_leaf = False

    assert isinstance(LeafRecord(), LeafCounted)
    assert isinstance(OutlineRecord(name="a"), LeafCounted)
    assert isinstance(Plain(), LeafCounted)
    assert not isinstance(object(), LeafCounted)
