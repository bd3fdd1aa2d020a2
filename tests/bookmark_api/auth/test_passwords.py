from bookmark_api.auth.passwords import hash_password, verify_password


def test_hash_password_does_not_store_plain_text() -> None:
    hashed = hash_password('123')

    assert hashed != '123'
    assert hashed.startswith('$argon2')


def test_verify_password_accepts_matching_password() -> None:
    assert verify_password('123', hash_password('123')) is True


def test_verify_password_rejects_wrong_password() -> None:
    assert verify_password('124', hash_password('123')) is False


def test_verify_password_rejects_malformed_hash() -> None:
    assert verify_password('123', 'not-an-argon2-hash') is False
