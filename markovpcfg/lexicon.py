"""Score words given tags, with smoothing for rare and unknown words.

The lexicon estimates ``P(word | tag)`` through Bayes' rule as
``P(tag | word) / P(tag) * P(word)`` (the last factor can be left out for
parsing, but keeps scores comparable across sentences). For words seen fewer
than ``rarethreshold`` times, ``P(tag | word)`` is interpolated with the
distribution of tags over word types, i.e., the tags that tend to be
assigned to new words; an unknown word gets only the latter."""
import logging
from math import log
from collections import Counter, defaultdict
from .tree import ispreterminal


class SimpleLexicon(object):
	"""A lexicon of word-tag counts read off the preterminals of trees.

	:param trees: an iterable of trees; the tags are the labels of their
		preterminals, which may be annotated.
	:param rarethreshold: words occurring fewer times are smoothed.

	>>> from markovpcfg.tree import Tree
	>>> lexicon = SimpleLexicon([Tree('(S (NP (NN dog)) (VP (VBZ barks)))')])
	>>> lexicon.knownword('dog'), lexicon.knownword('cat')
	(True, False)
	>>> lexicon.score('dog', 'NN') > lexicon.score('dog', 'VBZ')
	True
	>>> lexicon.score('dog', 'JJ')
	-inf
	"""

	def __init__(self, trees, rarethreshold=10):
		self.rarethreshold = rarethreshold
		self.totaltokens = 0
		self.totalwordtypes = 0
		self.tagcounts = Counter()
		self.wordcounts = Counter()
		self.typetagcounts = Counter()
		self.wordtagcounts = defaultdict(Counter)
		for tree in trees:
			for node in tree.subtrees(ispreterminal):
				self.add(node[0], node.label)
		logging.debug('lexicon: %d tokens, %d word types, %d tags',
				self.totaltokens, self.totalwordtypes, len(self.tagcounts))

	def add(self, word, tag):
		"""Count an occurrence of word with tag."""
		if not self.knownword(word):
			self.totalwordtypes += 1
			self.typetagcounts[tag] += 1
		self.totaltokens += 1
		self.tagcounts[tag] += 1
		self.wordcounts[word] += 1
		self.wordtagcounts[word][tag] += 1

	def score(self, word, tag):
		"""Return the log probability of word given tag.

		:returns: a log probability, or -inf if the tag was never seen, or
			cannot produce the word."""
		if not self.totaltokens or not self.tagcounts[tag]:
			return float('-inf')
		ptag = self.tagcounts[tag] / self.totaltokens
		cword = self.wordcounts.get(word, 0)
		ctagword = self.wordtagcounts[word][tag] if cword else 0
		if cword < self.rarethreshold:
			cword += 1
			ctagword += self.typetagcounts[tag] / self.totalwordtypes
		pword = (1 + cword) / (self.totaltokens + self.totalwordtypes)
		ptagword = ctagword / cword
		if ptagword <= 0:
			return float('-inf')
		return log(ptagword / ptag * pword)

	def tags(self):
		"""Return the list of tags seen in training, in order of appearance."""
		return list(self.tagcounts)

	def knownword(self, word):
		"""Test whether word was seen in training."""
		return word in self.wordcounts

	def __len__(self):
		return len(self.wordcounts)


__all__ = ['SimpleLexicon']
