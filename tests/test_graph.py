import unittest

from swctree.exceptions import *
from swctree.graph import SampleGraph
from swctree.reporting import WarningCollector
from swctree.samples import ROOT, read_samples
from swctree.unittest import read_morphology


def _graph(content, path="test.swc"):
    collector = WarningCollector(path)
    return SampleGraph(read_samples(content, path), collector), collector


class TestSampleGraph(unittest.TestCase):
    def test_index(self):
        graph, collector = _graph(read_morphology("simple.swc"))
        self.assertEqual(8, len(graph))
        self.assertIn(4, graph)
        self.assertNotIn(9, graph)
        self.assertEqual([1, 2, 3, 4, 5, 6, 7, 8], list(graph.samples.keys()))
        self.assertEqual([2, 7], graph.children(1))
        self.assertEqual([5, 6], graph.children(4))
        self.assertEqual([], graph.children(8))
        self.assertEqual([1], graph.children(ROOT))
        self.assertEqual(0, graph.child_count(5))
        self.assertEqual([1], [s.id for s in graph.soma_samples])
        self.assertEqual([1], [s.id for s in graph.root_samples])
        self.assertEqual(0, len(collector), "valid file should not warn")

    def test_forward_references(self):
        graph, _ = _graph(read_morphology("simple_forward_refs.swc"))
        self.assertEqual(8, len(graph))
        self.assertEqual([2, 7], graph.children(1))
        self.assertEqual([5, 6], graph.children(4))

    def test_self_parent(self):
        with self.assertRaises(SelfParentError) as cm:
            _graph("1 1 0 0 0 1 -1\n2 3 0 0 1 1 2\n")
        self.assertEqual((2,), cm.exception.lines)
        self.assertIn("test.swc:2", str(cm.exception))

    def test_self_parent_before_missing_parent(self):
        with self.assertRaises(SelfParentError):
            _graph("1 3 0 0 0 1 9\n2 3 0 0 1 1 2\n")

    def test_unsupported_type(self):
        for type_ in (0, 20, 100):
            with self.subTest(type=type_), self.assertRaises(
                UnsupportedSectionTypeError
            ):
                _graph(f"1 1 0 0 0 1 -1\n2 {type_} 0 0 1 1 1\n")

    def test_custom_types(self):
        graph, _ = _graph("1 1 0 0 0 1 -1\n2 5 0 0 1 1 1\n3 19 0 0 2 1 2\n")
        self.assertEqual(3, len(graph))

    def test_repeated_id(self):
        with self.assertRaises(RepeatedIdError) as cm:
            _graph("1 1 0 0 0 1 -1\n2 3 0 0 1 1 1\n2 3 0 0 2 1 1\n")
        self.assertEqual((2, 3), cm.exception.lines)

    def test_missing_parent(self):
        with self.assertRaises(MissingParentError) as cm:
            _graph("1 1 0 0 0 1 -1\n2 3 0 0 1 1 1\n3 3 0 0 2 1 5\n")
        self.assertEqual((3,), cm.exception.lines)

    def test_missing_parent_after_all_samples(self):
        # The missing parent is only reported once all samples have been checked.
        with self.assertRaises(RepeatedIdError):
            _graph("1 1 0 0 0 1 -1\n2 3 0 0 1 1 7\n3 3 0 0 2 1 1\n3 3 0 0 2 1 1\n")

    def test_zero_diameter(self):
        with self.assertWarns(ZeroDiameterWarning):
            graph, collector = _graph(
                "1 1 0 0 0 1 -1\n2 3 0 0 1 0 1\n3 3 0 0 2 1e-9 2\n"
            )
        self.assertEqual(2, len(collector))
        self.assertEqual([(2,), (3,)], [w.lines for w in collector])
        self.assertTrue(all(w.category is ZeroDiameterWarning for w in collector))

    def test_disconnected_neurite(self):
        with self.assertWarns(DisconnectedNeuriteWarning):
            graph, collector = _graph(read_morphology("no_soma.swc"))
        self.assertEqual(1, len(collector))
        warning = collector.warnings[0]
        self.assertIs(DisconnectedNeuriteWarning, warning.category)
        self.assertEqual((2,), warning.lines)
        self.assertTrue(warning.message.startswith("test.swc:2: "))
        self.assertEqual([1], [s.id for s in graph.root_samples])
        self.assertEqual([], graph.soma_samples)

    def test_cycle_passes_validation(self):
        graph, _ = _graph("1 1 0 0 0 1 -1\n2 3 0 0 1 1 3\n3 3 0 0 2 1 2\n")
        self.assertEqual([3], graph.children(2))
        self.assertEqual([2], graph.children(3))
