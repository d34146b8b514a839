from bindery.id import is_valid_id, new_id, normalize_id


def test_new_id_is_24_hex_chars():
    value = new_id()
    assert len(value) == 24
    assert is_valid_id(value)


def test_new_ids_are_unique_and_ordered():
    ids = [new_id() for _ in range(100)]
    assert len(set(ids)) == 100
    assert ids == sorted(ids)


def test_is_valid_id_rejects_malformed():
    assert not is_valid_id("abc")
    assert not is_valid_id("z" * 24)
    assert not is_valid_id(None)
    assert not is_valid_id(12345)


def test_uppercase_ids_are_valid_and_normalize():
    value = new_id()
    assert is_valid_id(value.upper())
    assert is_valid_id("A" * 24)
    assert normalize_id(value.upper()) == value
