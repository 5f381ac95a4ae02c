import random

import pytest

from pollverify.core.demo import DemoDataSource
from pollverify.core.exceptions import InvalidCodeError, NotFoundError, NotificationNotVerifiedError
from pollverify.schemas import BiometricCreate, MobileNotificationCreate


def register(store, voter_id=1, notification_type="sms"):
    return store.create_mobile_notification(MobileNotificationCreate(
        voter_id=voter_id,
        phone_number="+15551234567",
        email="voter1@example.com",
        opted_in=True,
        notification_type=notification_type,
    ))


def test_new_contact_gets_six_digit_code(store):
    notification = register(store)
    assert len(notification.verification_code) == 6
    assert notification.verification_code.isdigit()
    assert notification.verified is False
    assert notification.last_notified is None


def test_wrong_code_is_rejected(store):
    notification = register(store)
    wrong = "000000" if notification.verification_code != "000000" else "111111"

    with pytest.raises(InvalidCodeError) as excinfo:
        store.verify_mobile_notification(notification.id, wrong)
    assert excinfo.value.message == "Invalid verification code"
    assert store.get_mobile_notification(notification.id).verified is False


def test_exact_code_verifies(store):
    notification = register(store)
    verified = store.verify_mobile_notification(notification.id, notification.verification_code)
    assert verified.verified is True
    assert store.get_mobile_notification_by_voter_id(1).verified is True


def test_verify_unknown_notification(store):
    with pytest.raises(NotFoundError):
        store.verify_mobile_notification(3, "123456")


def test_send_requires_verified_contact(store, clock):
    notification = register(store)
    with pytest.raises(NotificationNotVerifiedError):
        store.send_notification(notification.id, "Your wait time is about 10 minutes")

    store.verify_mobile_notification(notification.id, notification.verification_code)
    sent_at = clock.advance(minutes=1)
    assert store.send_notification(notification.id, "Your wait time is about 10 minutes") is True
    assert store.get_mobile_notification(notification.id).last_notified == sent_at


def test_send_to_unknown_notification(store):
    with pytest.raises(NotFoundError):
        store.send_notification(8, "hello")


def test_biometric_verification(store, clock):
    biometric = store.create_biometric(BiometricCreate(
        voter_id=1, type="fingerprint", data_reference="fingerprint_data_id_1_reference"
    ))
    assert biometric.verified is False

    later = clock.advance(seconds=30)
    verified = store.verify_biometric(biometric.id, 2)
    assert verified.verified is True
    assert verified.verified_by == 2
    assert verified.verified_at == later
    assert verified.updated_at == later
    assert store.get_biometric_by_voter_id(1).verified is True

    with pytest.raises(NotFoundError):
        store.verify_biometric(50, 2)


def test_demo_data_is_reproducible_with_a_seed():
    first = DemoDataSource(random.Random(7))
    second = DemoDataSource(random.Random(7))
    assert first.verification_code() == second.verification_code()
    assert first.hourly_stat(9) == second.hourly_stat(9)


def test_demo_ranges():
    demo = DemoDataSource(random.Random(3))
    for _ in range(50):
        code = demo.verification_code()
        assert 100000 <= int(code) <= 999999

        row = demo.hourly_stat(10)
        assert 5 <= row.voters_processed <= 14
        assert 120 <= row.average_processing_time <= 179
        assert 8 <= row.wait_time <= 12
        assert 5 <= row.throughput <= 7

        volume, wait = demo.actual_outcome(20, 1)
        assert 18 <= volume <= 22
        assert wait >= 1
