"""CKY parser for a binarized PCFG with a dense chart.

The chart has two layers, both arrays of shape ``(n + 1, n + 1, S)`` for a
sentence of length n and S symbols:

- ``binary[start, end, X]``: the best score of X over the span when its
  top-most rule is a binary rule;
- ``unary[start, end, X]``: the best score after applying the unary closure
  to the binary layer (or, for spans of length 1, to the tags of a word).

Scores are log probabilities; ``-inf`` means there is no derivation. Each
finite score has a backpointer, which records how it was obtained. When
several derivations have the same score the first one found is kept; binary
combinations are considered in order of split point, left child and rule
index."""
import logging
from math import isfinite
from collections import namedtuple
import numpy as np
from .tree import Tree
from .treetransforms import unannotate

BinaryBackpointer = namedtuple('BinaryBackpointer',
		['split', 'left', 'right', 'parent'])
UnaryBackpointer = namedtuple('UnaryBackpointer', ['child'])


class DenseCFGChart(object):
	"""A CKY chart for a PCFG with dense arrays of scores and backpointers.

	:param sent: the sentence, a list of words.
	:param grammar: a :class:`containers.Grammar`.
	:param closure: the :class:`unaryclosure.UnaryClosure` of the grammar.
	:param root: the label of the root node; not added to the vocabulary.
	"""

	def __init__(self, sent, grammar, closure, root='ROOT'):
		self.sent = sent
		self.grammar = grammar
		self.closure = closure
		self.root = root
		self.rootid = grammar.vocab.get(root)
		self.lensent = len(sent)
		shape = (self.lensent + 1, self.lensent + 1, grammar.numsymbols)
		self.unary = np.full(shape, -np.inf, dtype=np.float64)
		self.binary = np.full(shape, -np.inf, dtype=np.float64)
		# empty object arrays are filled with None
		self.unarybp = np.empty(shape, dtype=object)
		self.binarybp = np.empty(shape, dtype=object)

	def score(self, label=None, start=0, end=None, preferunary=True):
		"""Return the score of label over a span; the root label of the whole
		sentence by default. A label that is not a symbol scores -inf."""
		label = self.rootid if label is None else label
		end = self.lensent if end is None else end
		if label is None or not 0 <= label < self.grammar.numsymbols:
			return float('-inf')
		layer = self.unary if preferunary else self.binary
		return float(layer[start, end, label])

	def numitems(self):
		"""Number of items with a finite score in either layer."""
		return int(np.isfinite(self.unary).sum()
				+ np.isfinite(self.binary).sum())

	def __bool__(self):
		"""Test whether the root derives the whole sentence."""
		return isfinite(self.score())

	def __repr__(self):
		return '%s(%r, root=%r)' % (
				self.__class__.__name__, self.sent, self.root)


def parse(sent, grammar, lexicon, closure, root='ROOT'):
	"""Viterbi CKY parse of a sentence.

	:param sent: a list of words.
	:param grammar: a binarized :class:`containers.Grammar`.
	:param lexicon: an object with a method ``score(word, tag)`` returning a
		log probability; tags are symbol labels. Non-finite scores are
		ignored.
	:param closure: the :class:`unaryclosure.UnaryClosure` of the grammar's
		unary rules.
	:param root: label of the root node.
	:returns: a tuple ``(chart, msg)``; the chart is true when the root label
		spans the sentence."""
	chart = DenseCFGChart(sent, grammar, closure, root)
	vocab = grammar.vocab
	for i, word in enumerate(sent):
		cell = chart.unary[i, i + 1]
		for tag in range(grammar.numsymbols):
			score = lexicon.score(word, vocab.label(tag))
			if score is not None and isfinite(score):
				cell[tag] = score
		_closecell(chart, i, i + 1, cell.copy())
	for width in range(2, chart.lensent + 1):
		for start in range(chart.lensent - width + 1):
			end = start + width
			for split in range(start + 1, end):
				_combine(chart, start, split, end)
			_closecell(chart, start, end, chart.binary[start, end])
	if chart:
		msg = 'log prob=%.6g' % chart.score()
	else:
		msg = 'no parse'
	return chart, msg


def _combine(chart, start, split, end):
	"""Relax binary items over [start, end) from the unary items over
	[start, split) and [split, end)."""
	grammar = chart.grammar
	leftcell = chart.unary[start, split]
	rightcell = chart.unary[split, end]
	cell = chart.binary[start, end]
	bpcell = chart.binarybp[start, end]
	lefts = grammar.leftchildren[np.isfinite(leftcell[grammar.leftchildren])]
	for left in lefts.tolist():
		parents, rights, scores = grammar.binarybyleft(left)
		candidates = scores + leftcell[left] + rightcell[rights]
		# any improvement must beat the scores before this left child;
		# re-check each one in rule order, since parents may repeat.
		for idx in np.flatnonzero(candidates > cell[parents]).tolist():
			parent = int(parents[idx])
			if candidates[idx] > cell[parent]:
				cell[parent] = candidates[idx]
				bpcell[parent] = BinaryBackpointer(
						split, left, int(rights[idx]), parent)


def _closecell(chart, start, end, source):
	"""Relax the unary items over a span from the scores in ``source``, by
	applying the unary closure to each finite item in ascending order."""
	closure = chart.closure
	cell = chart.unary[start, end]
	bpcell = chart.unarybp[start, end]
	for child in np.flatnonzero(np.isfinite(source)).tolist():
		parents, scores = closure.arraysbychild(child)
		candidates = scores + source[child]
		# parents of a child are distinct
		for idx in np.flatnonzero(candidates > cell[parents]).tolist():
			parent = int(parents[idx])
			cell[parent] = candidates[idx]
			bpcell[parent] = UnaryBackpointer(child)


def reconstruct(chart, label, start, end, preferunary):
	"""Build the best derivation of label over [start, end) from the chart.

	:param label: a symbol id.
	:param preferunary: if True, start from the unary layer, otherwise from
		the binary layer.
	:returns: a binarized and annotated Tree with words as leaves.
	:raises ValueError: when a backpointer or a unary path is missing, which
		indicates an inconsistent chart."""
	vocab = chart.grammar.vocab
	if end - start == 1:
		bp = chart.unarybp[start, end, label]
		if bp is None or bp.child == label:
			return Tree(vocab.label(label), [chart.sent[start]])
		path = _path(chart, label, bp.child, start, end)
		tree = Tree(vocab.label(path[-1]), [chart.sent[start]])
		for sym in path[-2::-1]:
			tree = Tree(vocab.label(sym), [tree])
		return tree
	if preferunary:
		bp = chart.unarybp[start, end, label]
		if bp is None:
			raise ValueError('no unary backpointer for %s over (%d, %d)' % (
					vocab.label(label), start, end))
		if bp.child == label:
			return reconstruct(chart, label, start, end, False)
		path = _path(chart, label, bp.child, start, end)
		tree = reconstruct(chart, path[-1], start, end, False)
		for sym in path[-2::-1]:
			tree = Tree(vocab.label(sym), [tree])
		return tree
	bp = chart.binarybp[start, end, label]
	if bp is None:
		raise ValueError('no binary backpointer for %s over (%d, %d)' % (
				vocab.label(label), start, end))
	return Tree(vocab.label(label), [
			reconstruct(chart, bp.left, start, bp.split, True),
			reconstruct(chart, bp.right, bp.split, end, True)])


def _path(chart, parent, child, start, end):
	"""Look up the unary path recorded in a backpointer."""
	path = chart.closure.pathfor(parent, child)
	if path is None:
		vocab = chart.grammar.vocab
		raise ValueError('no unary path from %s to %s over (%d, %d)' % (
				vocab.label(parent), vocab.label(child), start, end))
	return path


def bestparse(chart):
	"""Return the Viterbi parse with binarization and annotation removed.

	When the root does not derive the sentence, return a failure tree: the
	root label over the single leaf ``JUNK``."""
	if not chart:
		return Tree(chart.root, ['JUNK'])
	tree = reconstruct(chart, chart.rootid, 0, chart.lensent, True)
	logging.debug('viterbi derivation: %s', tree)
	return unannotate(tree)


__all__ = ['BinaryBackpointer', 'UnaryBackpointer', 'DenseCFGChart', 'parse',
		'reconstruct', 'bestparse']
