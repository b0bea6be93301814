import unittest

from usercache.cache.mock_user_store import MockUserStore
from usercache.model.user import User


class TestMockUserStore(unittest.TestCase):
    def setUp(self):
        self.store = MockUserStore()

    def test_starts_empty(self):
        self.assertEqual(self.store.user_counter, 0)
        self.assertEqual(self.store.get_all(), [])

    def test_keys_by_call_counter(self):
        for name in ("MockUser1", "MockUser2", "MockUser3"):
            self.store.add(User(name))
        self.assertEqual(self.store.user_counter, 3)
        self.assertEqual(sorted(self.store.mock_users), ["1", "2", "3"])

    def test_colliding_ids_are_not_deduplicated(self):
        for name in ("A", "B", "C"):
            self.store.add(User(name, id="same"))
        self.assertEqual(len(self.store.get_all()), 3)
        self.assertEqual([u.name for u in self.store.added_users], ["A", "B", "C"])

    def test_instances_are_independent(self):
        self.store.add(User("A"))
        self.assertEqual(MockUserStore().get_all(), [])


if __name__ == "__main__":
    unittest.main()
