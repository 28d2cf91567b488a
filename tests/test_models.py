import unittest

from todo import ToDoItem


class ToDoItemTestCase(unittest.TestCase):

    def test_defaults_are_zero_values(self):
        self.assertEqual(ToDoItem(), ToDoItem(id=0, title="", is_done=False))

    def test_to_dict_uses_file_keys(self):
        item = ToDoItem(id=3, title="Learn Python", is_done=True)
        self.assertEqual(item.to_dict(), {"Id": 3, "Title": "Learn Python", "IsDone": True})

    def test_from_dict(self):
        item = ToDoItem.from_dict({"Id": 3, "Title": "Learn Python", "IsDone": True})
        self.assertEqual(item, ToDoItem(id=3, title="Learn Python", is_done=True))

    def test_from_dict_missing_key(self):
        with self.assertRaises(ValueError):
            ToDoItem.from_dict({"Id": 3, "Title": "Learn Python"})

    def test_from_dict_rejects_bool_id(self):
        with self.assertRaises(ValueError):
            ToDoItem.from_dict({"Id": True, "Title": "x", "IsDone": False})

    def test_from_dict_rejects_non_bool_done(self):
        with self.assertRaises(ValueError):
            ToDoItem.from_dict({"Id": 1, "Title": "x", "IsDone": "yes"})

    def test_from_dict_rejects_non_object(self):
        with self.assertRaises(ValueError):
            ToDoItem.from_dict([1, "x", False])

    def test_from_json(self):
        item = ToDoItem.from_json('{"Id": 42, "Title": "Answer", "IsDone": false}')
        self.assertEqual(item, ToDoItem(id=42, title="Answer", is_done=False))

    def test_from_json_malformed(self):
        with self.assertRaises(ValueError):
            ToDoItem.from_json('{"Id": 42,')


if __name__ == "__main__":
    unittest.main()
