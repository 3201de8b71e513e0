import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from priority_queue import EmptyQueueError, PriorityQueue
from binary_heap import BinaryHeap


class TestPriorityQueueContract(unittest.TestCase):

    def test_contract_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            PriorityQueue()

    def test_partial_implementation_cannot_be_instantiated(self):
        class PeekOnly(PriorityQueue):
            def peek(self):
                return None

        with self.assertRaises(TypeError):
            PeekOnly()

    def test_binary_heap_satisfies_contract(self):
        self.assertIsInstance(BinaryHeap(), PriorityQueue)

    def test_empty_queue_error_is_an_index_error(self):
        self.assertTrue(issubclass(EmptyQueueError, IndexError))

    def test_callers_can_catch_index_error(self):
        queue: PriorityQueue[int] = BinaryHeap()
        with self.assertRaises(IndexError):
            queue.poll()


if __name__ == "__main__":
    unittest.main()
