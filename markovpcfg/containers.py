"""Data types for the symbol table, grammar rules and the grammar."""
from collections import namedtuple, defaultdict
import numpy as np

BinaryRule = namedtuple('BinaryRule', ['parent', 'left', 'right', 'score'])
UnaryRule = namedtuple('UnaryRule', ['parent', 'child', 'score'])


class Vocabulary(object):
	"""An append-only mapping of labels to consecutive integer ids.

	>>> vocab = Vocabulary()
	>>> vocab.indexof('S'), vocab.indexof('NP'), vocab.indexof('S')
	(0, 1, 0)
	>>> vocab.label(1), len(vocab)
	('NP', 2)
	"""

	def __init__(self, labels=()):
		self.labels = []
		self.ids = {}
		for label in labels:
			self.indexof(label)

	def indexof(self, label):
		"""Return the id of label; an unseen label is added."""
		try:
			return self.ids[label]
		except KeyError:
			self.ids[label] = len(self.labels)
			self.labels.append(label)
			return self.ids[label]

	def get(self, label, default=None):
		"""Return the id of label without adding it."""
		return self.ids.get(label, default)

	def label(self, idx):
		"""Return the label with the given id."""
		return self.labels[idx]

	def __contains__(self, label):
		return label in self.ids

	def __iter__(self):
		return iter(self.labels)

	def __len__(self):
		return len(self.labels)

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__, self.labels)


class Grammar(object):
	"""A binarized PCFG with rules indexed for CKY parsing.

	:param vocab: a :class:`Vocabulary` containing every symbol in the rules.
	:param binary: a sequence of :class:`BinaryRule`; the position of a rule
		in this sequence is its rule index.
	:param unary: a sequence of :class:`UnaryRule`.

	Binary rules are grouped by their left child as parallel arrays of
	parents, right children and scores, in ascending rule index.

	>>> vocab = Vocabulary(['S', 'NP', 'VP'])
	>>> grammar = Grammar(vocab, [BinaryRule(0, 1, 2, -0.5)], [])
	>>> grammar.leftchildren.tolist()
	[1]
	>>> [a.tolist() for a in grammar.binarybyleft(1)]
	[[0], [2], [-0.5]]
	"""

	def __init__(self, vocab, binary, unary):
		self.vocab = vocab
		self.binary = list(binary)
		self.unary = list(unary)
		for rule in self.binary + self.unary:
			if not all(0 <= a < len(vocab) for a in rule[:-1]):
				raise ValueError('rule with unknown symbol: %r' % (rule, ))
		byleft = defaultdict(list)
		for rule in self.binary:
			byleft[rule.left].append(rule)
		self.leftchildren = np.array(sorted(byleft), dtype=np.intp)
		self._byleft = {left: (
				np.array([rule.parent for rule in rules], dtype=np.intp),
				np.array([rule.right for rule in rules], dtype=np.intp),
				np.array([rule.score for rule in rules], dtype=np.float64))
				for left, rules in byleft.items()}
		self._empty = (np.zeros(0, dtype=np.intp),
				np.zeros(0, dtype=np.intp), np.zeros(0, dtype=np.float64))

	def binarybyleft(self, left):
		""":returns: a tuple of arrays ``(parents, rights, scores)`` with the
		binary rules having ``left`` as left child."""
		return self._byleft.get(left, self._empty)

	@property
	def numsymbols(self):
		"""The number of symbols in the vocabulary."""
		return len(self.vocab)

	def __str__(self):
		return ('%d symbols, %d binary rules, %d unary rules' % (
				len(self.vocab), len(self.binary), len(self.unary)))


__all__ = ['BinaryRule', 'UnaryRule', 'Vocabulary', 'Grammar']
