"""Read and write treebanks in bracket notation."""
import os
from glob import glob
from collections import OrderedDict
from .tree import Tree, writebrackettree, unescape
from .util import openread

WRITERS = ('bracket', 'pprint', 'tokens')
FUNCTIONS = (None, 'leave', 'remove')


class BracketCorpusReader(object):
	"""Corpus reader for phrase-structures in bracket notation.

	For example::

		(S (NP John) (VP (VB is) (JJ rich)) (. .))

	A tree may span several lines, and a line may contain several trees.
	Trees are numbered consecutively from 1, across files."""

	def __init__(self, path, encoding='utf8', ensureroot='ROOT',
			functions=None):
		"""
		:param path: filename or pattern of corpus files; e.g., ``wsj*.mrg``;
			``-`` for standard input.
		:param ensureroot: add root node with given label if necessary; an
			unlabeled top node, as in ``( (S ...) )``, gets this label.
		:param functions: one of ...

			:None, 'leave': leave syntactic labels as is [default].
			:'remove': strip away hyphen-separated grammatical function
				and coindexation, e.g., ``NP-SBJ=2 => NP``."""
		if functions not in FUNCTIONS:
			raise ValueError('Expected one of %r. Got: %r' % (
					FUNCTIONS, functions))
		self.ensureroot = ensureroot
		self.functions = functions
		self._encoding = encoding
		self._filenames = sorted(glob(path)) if path != '-' else ['-']
		if not self._filenames:
			raise ValueError("no files matched pattern '%s' in %s" % (
					path, os.getcwd()))
		self._trees_cache = None

	def blocks(self):
		"""
		:returns: an ordered dictionary with the raw string of each tree."""
		return OrderedDict(self._read_blocks())

	def itertrees(self):
		""":returns: an iterator of tuples ``(key, tree)``."""
		for n, block in self._read_blocks():
			yield n, self._parsetree(block)

	def trees(self):
		"""
		:returns: an ordered dictionary of parse trees
			(``Tree`` objects with words as leaves)."""
		if self._trees_cache is None:
			self._trees_cache = OrderedDict(self.itertrees())
		return OrderedDict(self._trees_cache)

	def sents(self):
		"""
		:returns: an ordered dictionary of sentences,
			each sentence being a list of words."""
		return OrderedDict((n, tree.leaves())
				for n, tree in self.trees().items())

	def tagged_sents(self):
		"""
		:returns: an ordered dictionary of tagged sentences,
			each tagged sentence being a list of (word, tag) pairs."""
		return OrderedDict((n, tree.pos()) for n, tree in self.trees().items())

	def _read_blocks(self):
		"""Iterate over strings in corpus files corresponding to trees."""
		n = 0
		for filename in self._filenames:
			with openread(filename, encoding=self._encoding) as inp:
				for block in segmentbrackets(inp):
					n += 1
					yield n, block

	def _parsetree(self, block):
		""":returns: a parse tree with labels transformed as requested."""
		tree = Tree.parse(block, parse_leaf=unescape)
		if self.functions == 'remove':
			for node in tree.subtrees():
				# map NP-SUBJ and NP=2 to NP; don't touch -NONE-
				for char in '-=':
					x = node.label.find(char)
					if x > 0:
						node.label = node.label[:x]
		if self.ensureroot:
			if tree.label == '':
				tree.label = self.ensureroot
			elif tree.label != self.ensureroot:
				tree = Tree(self.ensureroot, [tree])
		return tree


def segmentbrackets(lines):
	"""Yield complete bracketed expressions from an iterable of lines.

	>>> list(segmentbrackets(['(S (NP John)', ' (VP runs)) (X x)']))
	['(S (NP John)\\n (VP runs))', '(X x)']

	:raises ValueError: for unbalanced brackets or text outside of brackets.
	"""
	parens = 0
	result = []
	for line in lines:
		line = line.rstrip('\r\n')
		start = 0
		for idx, char in enumerate(line):
			if char == '(':
				if parens == 0:
					start = idx
				parens += 1
			elif char == ')':
				parens -= 1
				if parens < 0:
					raise ValueError('unbalanced parentheses: %r' % line)
				if parens == 0:
					result.append(line[start:idx + 1])
					yield '\n'.join(result)
					result = []
			elif parens == 0 and not char.isspace():
				raise ValueError('text outside of brackets: %r' % line)
		if parens:
			result.append(line[start:])
			start = 0
	if parens:
		raise ValueError('unbalanced parentheses at end of input; '
				'%d brackets not closed' % parens)


def writetree(tree, fmt='bracket'):
	"""Convert a tree to a string representation in the given format.

	:param fmt: ``bracket`` gives a tree on a single line, ``pprint`` an
		indented tree followed by an empty line, ``tokens`` only the words.

	>>> writetree(Tree('(S (NP John) (VP runs))'), 'tokens')
	'John runs\\n'
	"""
	if fmt == 'bracket':
		return writebrackettree(tree)
	elif fmt == 'pprint':
		return '%s\n\n' % tree.pprint()
	elif fmt == 'tokens':
		return '%s\n' % ' '.join(tree.leaves())
	raise ValueError('unrecognized format: %r' % fmt)


__all__ = ['BracketCorpusReader', 'segmentbrackets', 'writetree']
