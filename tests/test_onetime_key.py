import pytest

from beldex.keys import KeyPair, PrivateKey, PublicKey, ViewPair
from beldex.onetime_key import (
    KeyGenerator,
    KeyRecoverer,
    SubKeyChecker,
    encode_varint,
)
from beldex.subaddress import Index

VIEW_HEX = "bcfdda53205318e1c14fa0ddca1a45df363bb427972981d0249d0f4652a7df07"
SPEND_HEX = "e5f4301d32f3bdaef814a835a18aaaa24b13cc76cf01a832a7852faf9322e907"
ONE_TIME_PK = "e3e77faca64b5997ac1f75763e87713d03d9e2896edec65843ffd2970ef1dde6"
TX_PUBKEY = "5d1402db663eda8cef4f6782b66321e4a990f746aca249c973e098ba2c0837c1"
SUB_ONE_TIME_PK = "b6a2e2f35a93d637ff7d25e20da326cee8e92005d3b18b3c425dabe833656899"
SUB_TX_PUBKEY = "d6c75cf8c76ac458123f2a498512eb65bb3cecba346c8fcfc516dc0c88518bb9"


@pytest.fixture
def keypair():
    return KeyPair(
        view=PrivateKey.from_hex(VIEW_HEX), spend=PrivateKey.from_hex(SPEND_HEX)
    )


@pytest.fixture
def viewpair(keypair):
    return ViewPair(
        view=keypair.view, spend=PublicKey.from_private_key(keypair.spend)
    )


@pytest.fixture
def checker(viewpair):
    return SubKeyChecker(viewpair, range(0, 3), range(0, 3))


def test_one_time_key_generator(viewpair):
    one_time_pk = PublicKey.from_hex(ONE_TIME_PK)
    generator = KeyGenerator.from_key(viewpair, PublicKey.from_hex(TX_PUBKEY))
    assert not generator.check(0, one_time_pk)
    assert generator.check(1, one_time_pk)
    assert not generator.check(2, one_time_pk)


def test_one_time_key_recover(keypair):
    one_time_sk = PrivateKey.from_hex(
        "afaebe00bcb29e233c2717e4574c7c8b114890571430bd1427d835ed7339050e"
    )
    one_time_pk = PublicKey.from_private_key(one_time_sk)
    assert str(one_time_pk) == ONE_TIME_PK

    recoverer = KeyRecoverer(keypair, PublicKey.from_hex(TX_PUBKEY))
    recovered = recoverer.recover(1, Index())
    assert (
        str(recovered)
        == "afaebe00bcb29e233c2717e4574c7c8b114890571430bd1427d835ed7339050e"
    )
    assert PublicKey.from_private_key(recovered) == one_time_pk


def test_one_time_subkey_recover(keypair):
    one_time_sk = PrivateKey.from_hex(
        "9650bef0bff89132c91f2244d909e0d65acd13415a46efcb933e6c10b7af4c01"
    )
    one_time_pk = PublicKey.from_private_key(one_time_sk)
    assert str(one_time_pk) == SUB_ONE_TIME_PK

    recoverer = KeyRecoverer(keypair, PublicKey.from_hex(SUB_TX_PUBKEY))
    recovered = recoverer.recover(1, Index(major=0, minor=1))
    assert (
        str(recovered)
        == "9650bef0bff89132c91f2244d909e0d65acd13415a46efcb933e6c10b7af4c01"
    )
    assert PublicKey.from_private_key(recovered) == one_time_pk


def test_one_time_key_checker(checker):
    one_time_pk = PublicKey.from_hex(ONE_TIME_PK)
    tx_pubkey = PublicKey.from_hex(TX_PUBKEY)
    assert checker.check(0, one_time_pk, tx_pubkey) is None
    assert checker.check(1, one_time_pk, tx_pubkey) == Index(major=0, minor=0)
    assert checker.check(2, one_time_pk, tx_pubkey) is None


def test_one_time_subkey_checker(checker):
    one_time_pk = PublicKey.from_hex(SUB_ONE_TIME_PK)
    tx_pubkey = PublicKey.from_hex(SUB_TX_PUBKEY)
    assert checker.check(0, one_time_pk, tx_pubkey) is None
    assert checker.check(1, one_time_pk, tx_pubkey) == Index(major=0, minor=1)
    assert checker.check(2, one_time_pk, tx_pubkey) is None


def test_checker_table_size(checker):
    assert len(checker.table) == 9
    assert set(checker.table.values()) == {
        Index(major, minor) for major in range(3) for minor in range(3)
    }


def test_check_with_key_generator(viewpair, checker):
    one_time_pk = PublicKey.from_hex(SUB_ONE_TIME_PK)
    keygen = KeyGenerator.from_key(viewpair, PublicKey.from_hex(SUB_TX_PUBKEY))
    assert checker.check_with_key_generator(keygen, 1, one_time_pk) == Index(0, 1)
    assert checker.check_with_key_generator(keygen, 0, one_time_pk) is None


def test_sender_and_receiver_agree(viewpair):
    random = PrivateKey.from_int(123456789)
    tx_pubkey = PublicKey.from_private_key(random)
    public_view = PublicKey.from_private_key(viewpair.view)
    sender = KeyGenerator.from_random(public_view, viewpair.spend, random)
    receiver = KeyGenerator.from_key(viewpair, tx_pubkey)
    assert sender.rv == receiver.rv
    key = sender.one_time_key(4)
    assert receiver.check(4, key)
    assert not receiver.check(5, key)


@pytest.mark.parametrize(
    "value, expected",
    [(0, b"\x00"), (1, b"\x01"), (127, b"\x7f"), (128, b"\x80\x01"), (300, b"\xac\x02")],
)
def test_encode_varint(value, expected):
    assert encode_varint(value) == expected


def test_encode_varint_negative():
    with pytest.raises(ValueError):
        encode_varint(-1)