import unittest

from swctree import Option, SectionType, SomaType, build_mutable, load_swc
from swctree.exceptions import DisconnectedNeuriteWarning
from swctree.modifiers import apply_modifiers, no_duplicates, nrn_order, soma_sphere
from swctree.mut import MutableMorphology
from swctree.soma import Soma
from swctree.unittest import MorphologyTestCase, read_morphology


class TestModifiers(MorphologyTestCase, unittest.TestCase):
    def _simple(self):
        m, _ = build_mutable(read_morphology("simple.swc"))
        return m

    def test_no_modifier(self):
        m = self._simple()
        apply_modifiers(m, Option.NO_MODIFIER)
        self.assertEqual([4, 2, 2, 3], [len(s) for s in m.sections])

    def test_two_points_sections(self):
        m = self._simple()
        m.apply_modifiers(Option.TWO_POINTS_SECTIONS)
        self.assertEqual([2, 2, 2, 2], [len(s) for s in m.sections])
        self.assertEqual([(0, 0, 0), (0, 3, 0)], m.sections[0].points)
        self.assertEqual([2, 1], m.sections[0].diameters)
        self.assertContinuous(m)

    def test_no_duplicates(self):
        m = self._simple()
        m.apply_modifiers(Option.NO_DUPLICATES)
        dend, left, right, axon = m.sections
        self.assertEqual([(0, 1, 0), (0, 2, 0), (0, 3, 0)], dend.points, "soma point removed")
        self.assertEqual([1, 1, 1], dend.diameters)
        self.assertEqual([(0, -1, 0), (0, -2, 0)], axon.points)
        self.assertEqual([(1, 4, 0)], left.points)
        self.assertEqual([0.5], right.diameters)
        self.assertAligned(m)

    def test_no_duplicates_single_point(self):
        m = MutableMorphology()
        root = m.append_root_section([(0, 0, 0)], [1], SectionType.AXON)
        root.append_section([(0, 0, 0)], [1])
        m.apply_modifiers(Option.NO_DUPLICATES)
        self.assertEqual(1, len(root.children[0]), "sections are never emptied")

    def test_no_duplicates_without_soma(self):
        with self.assertWarns(DisconnectedNeuriteWarning):
            m, _ = build_mutable(read_morphology("no_soma.swc"))
        no_duplicates(m)
        root, left, right = m.sections
        self.assertEqual(
            [(0, 0, 0), (0, 0, 1), (0, 0, 2)],
            root.points,
            "a neurite root has no inherited point to remove",
        )
        self.assertEqual([(1, 0, 3)], left.points)

    def test_no_duplicates_before_soma_sphere(self):
        m, _ = build_mutable(read_morphology("cylinder_soma.swc"))
        m.apply_modifiers(Option.SOMA_SPHERE | Option.NO_DUPLICATES)
        dend, axon = m.root_sections
        self.assertEqual([(3, 1, 0), (3, 2, 0)], dend.points)
        self.assertEqual([(3, -1, 0)], axon.points)
        self.assertEqual([(1.5, 0.0, 0.0)], m.soma.points)

    def test_soma_sphere(self):
        m, _ = build_mutable(read_morphology("cylinder_soma.swc"))
        soma_sphere(m)
        self.assertEqual(SomaType.SINGLE_POINT, m.soma.type)
        self.assertEqual([(1.5, 0.0, 0.0)], m.soma.points)
        self.assertAlmostEqual(2.0, m.soma.diameters[0])

    def test_soma_sphere_single_point(self):
        m = MutableMorphology(Soma(SomaType.SINGLE_POINT, [(1, 1, 1)], [3]))
        soma_sphere(m)
        self.assertEqual([(1, 1, 1)], m.soma.points)
        self.assertEqual([3], m.soma.diameters)

    def test_nrn_order(self):
        m, _ = build_mutable(read_morphology("cylinder_soma.swc"))
        nrn_order(m)
        self.assertEqual(
            [SectionType.AXON, SectionType.BASAL_DENDRITE],
            [s.type for s in m.root_sections],
        )

    def test_nrn_order_stable(self):
        m = MutableMorphology()
        a = m.append_root_section([(0, 0, 0)], [1], SectionType.BASAL_DENDRITE)
        b = m.append_root_section([(1, 0, 0)], [1], SectionType.AXON)
        c = m.append_root_section([(2, 0, 0)], [1], SectionType.BASAL_DENDRITE)
        nrn_order(m)
        self.assertEqual([b, a, c], m.root_sections)

    def test_combined(self):
        props = load_swc(
            read_morphology("cylinder_soma.swc"),
            options=Option.SOMA_SPHERE | Option.NRN_ORDER | Option.TWO_POINTS_SECTIONS,
        )
        self.assertEqual(SomaType.SINGLE_POINT, props.soma_type)
        self.assertEqual([2, 3], props.section_types.tolist())
        self.assertEqual([0, 2, 4], props.section_offsets.tolist())

    def test_int_options(self):
        m = self._simple()
        apply_modifiers(m, 5)
        self.assertEqual([1, 1, 1, 1], [len(s) for s in m.sections])
