from cdc_platform.models import BlockData, BlockTag, Status, is_success


def test_is_success():
    assert is_success({"status": "Success", "data": {}})
    assert not is_success({"status": "Failed", "data": {}})
    assert not is_success(None)
    assert not is_success(["Success"])


def test_enum_values_match_wire_format():
    assert Status.SUCCESS == "Success"
    assert Status.FAILED == "Failed"
    assert BlockTag.LATEST == "latest"
    assert BlockTag.EARLIEST == "earliest"


def test_block_payload_keys_are_optional():
    assert {"number", "hash", "parentHash", "transactions", "timestamp"} <= BlockData.__optional_keys__
    assert BlockData.__required_keys__ == frozenset()
