from unittest import TestCase

from alignstats.alignment import Alignment
from alignstats.hsp import HSP, LSP, _Base


class TestHSP(TestCase):
    """
    Tests of the L{alignstats.hsp.HSP} class.
    """

    def testExpectedAttributes(self):
        """
        An HSP must have the expected attributes.
        """
        alignment = Alignment(30.0, 100)
        hsp = HSP(7, alignment=alignment)
        self.assertEqual(7, hsp.score)
        self.assertIs(alignment, hsp.alignment)

    def testEqual(self):
        """
        Two HSPs must compare properly with ==
        """
        self.assertEqual(HSP(7), HSP(7))

    def testLt(self):
        """
        Two HSPs must compare properly with <
        """
        self.assertTrue(HSP(7) < HSP(8))

    def testSort(self):
        """
        Sorting HSPs in reverse must put the highest score first.
        """
        hsps = sorted([HSP(3), HSP(9), HSP(7)], reverse=True)
        self.assertEqual([9, 7, 3], [hsp.score for hsp in hsps])

    def testBetterThanTrue(self):
        """
        An HSP must be better than a lower score.
        """
        self.assertTrue(HSP(7).betterThan(5))

    def testBetterThanFalse(self):
        """
        An HSP must not be better than a higher score.
        """
        self.assertFalse(HSP(5).betterThan(7))

    def testToDict(self):
        """
        The toDict method must return the expected dictionary.
        """
        self.assertEqual(
            {"score": 7, "rawScore": 30.0, "queryLength": 100},
            HSP(7, alignment=Alignment(30.0, 100)).toDict(),
        )

    def testToDictNoAlignment(self):
        """
        The toDict method must return just the score if there is no
        alignment.
        """
        self.assertEqual({"score": 7}, HSP(7).toDict())


class TestLSP(TestCase):
    """
    Tests of the L{alignstats.hsp.LSP} class.
    """

    def testEqual(self):
        """
        Two LSPs must compare properly with ==
        """
        self.assertEqual(LSP(7), LSP(7))

    def testLt(self):
        """
        Two LSPs must compare properly with <
        """
        self.assertTrue(LSP(8) < LSP(7))

    def testSort(self):
        """
        Sorting LSPs in reverse must put the lowest score first.
        """
        lsps = sorted([LSP(0.5), LSP(3.0), LSP(1e-10)], reverse=True)
        self.assertEqual([1e-10, 0.5, 3.0], [lsp.score for lsp in lsps])

    def testBetterThanTrue(self):
        """
        An LSP must be better than a higher score.
        """
        self.assertTrue(LSP(5).betterThan(7))

    def testBetterThanFalse(self):
        """
        An LSP must not be better than a lower score.
        """
        self.assertFalse(LSP(7).betterThan(5))

    def testHSPAndLSPNotComparable(self):
        """
        Comparing an HSP with an LSP must raise TypeError.
        """
        self.assertRaises(TypeError, lambda: HSP(3) < LSP(4))


class TestBase(TestCase):
    """
    Tests of the L{alignstats.hsp._Base} class.
    """

    def testBetterThanNotImplemented(self):
        """
        Calling betterThan on the base class must raise NotImplementedError.
        """
        self.assertRaises(NotImplementedError, _Base(3).betterThan, 4)
