from imageupload.application.services.admission_policy import ImageAdmissionPolicy
from imageupload.config import MAX_IMAGES_PER_CUSTOMER


class FakeImageRepo:
    def __init__(self, counts):
        self.counts = counts
        self.calls = 0

    def count_for_customer(self, customer_id: int) -> int:
        self.calls += 1
        return self.counts.get(customer_id, 0)


def test_default_limit_is_ten():
    policy = ImageAdmissionPolicy(image_repo=FakeImageRepo({}))
    assert policy.max_images == MAX_IMAGES_PER_CUSTOMER == 10


def test_can_add_below_limit():
    policy = ImageAdmissionPolicy(image_repo=FakeImageRepo({1: 9}))
    assert policy.can_add(1) is True
    assert policy.remaining_slots(1) == 1


def test_cannot_add_at_limit():
    policy = ImageAdmissionPolicy(image_repo=FakeImageRepo({1: 10}))
    assert policy.can_add(1) is False
    assert policy.remaining_slots(1) == 0


def test_remaining_slots_clamped_when_over_limit():
    policy = ImageAdmissionPolicy(image_repo=FakeImageRepo({1: 12}))
    assert policy.can_add(1) is False
    assert policy.remaining_slots(1) == 0


def test_unknown_customer_has_full_quota():
    policy = ImageAdmissionPolicy(image_repo=FakeImageRepo({}))
    assert policy.count(99) == 0
    assert policy.remaining_slots(99) == 10


def test_count_is_queried_live_each_time():
    repo = FakeImageRepo({1: 3})
    policy = ImageAdmissionPolicy(image_repo=repo)

    assert policy.can_add(1)
    repo.counts[1] = 10
    assert not policy.can_add(1)
    assert repo.calls == 2


def test_quota_comes_from_a_single_count_query():
    repo = FakeImageRepo({1: 12})
    quota = ImageAdmissionPolicy(image_repo=repo).quota(1)

    assert repo.calls == 1
    assert quota.current_count == 12
    assert quota.can_add is False
    assert quota.remaining_slots == 0
