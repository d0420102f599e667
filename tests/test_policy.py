from securepass.policy import check_policy


def test_valid_password_has_no_errors():
    result = check_policy("Abcdefg1")
    assert result.is_valid
    assert result.errors == []

def test_weak_password_lists_every_rule_in_order():
    result = check_policy("weak", require_symbols=True)
    assert not result.is_valid
    joined = [e.lower() for e in result.errors]
    assert len(joined) == 4
    assert "8 characters" in joined[0]
    assert "uppercase" in joined[1]
    assert "number" in joined[2]
    assert "symbol" in joined[3]

def test_symbols_not_required_by_default():
    assert check_policy("Abcdefg1").is_valid
    assert not check_policy("Abcdefg1", require_symbols=True).is_valid

def test_custom_min_length():
    assert not check_policy("Abcdefg1", min_length=12).is_valid
    assert check_policy("Ab1", min_length=3).is_valid

def test_requirements_can_be_disabled():
    result = check_policy("abcdefgh", require_uppercase=False, require_numbers=False)
    assert result.is_valid
