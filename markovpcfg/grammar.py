"""Read off a PCFG from binarized trees, and write and summarize grammars."""
from math import log
from collections import Counter
from .tree import Tree, ispreterminal, escape
from .containers import Vocabulary, Grammar, BinaryRule, UnaryRule


def treebankgrammar(trees, vocab=None):
	"""Induce a PCFG with relative frequencies of productions.

	:param trees: binarized trees, e.g., as produced by
		:func:`treetransforms.annotate`.
	:param vocab: a :class:`Vocabulary` to extend; by default a new one.
	:returns: a :class:`Grammar` with log probabilities as scores, and rules in
		order of first occurrence. Preterminals produce no rules, but their
		labels are added to the vocabulary.
	:raises ValueError: for a node with more than two children, or with a
		terminal and other children.

	>>> tree = Tree('(ROOT (S (NN dog) (VBZ barks)))')
	>>> grammar = treebankgrammar([tree])
	>>> print(writegrammar(grammar)[0])  # doctest: +NORMALIZE_WHITESPACE
	S	NN	VBZ	0
	ROOT	S	0
	"""
	if vocab is None:
		vocab = Vocabulary()
	binary = Counter()
	unary = Counter()
	parents = Counter()
	for tree in trees:
		for node in tree.subtrees():
			if ispreterminal(node):
				vocab.indexof(node.label)
				continue
			if len(node) > 2:
				raise ValueError('tree is not binarized; node with %d '
						'children:\n%s' % (len(node), node))
			if not node or not all(isinstance(a, Tree) for a in node):
				raise ValueError('node should be a preterminal or have only '
						'nonterminal children:\n%s' % node)
			parent = vocab.indexof(node.label)
			parents[parent] += 1
			if len(node) == 1:
				unary[parent, vocab.indexof(node[0].label)] += 1
			else:
				binary[parent, vocab.indexof(node[0].label),
						vocab.indexof(node[1].label)] += 1
	return Grammar(vocab,
			[BinaryRule(parent, left, right, log(count / parents[parent]))
				for (parent, left, right), count in binary.items()],
			[UnaryRule(parent, child, log(count / parents[parent]))
				for (parent, child), count in unary.items()])


def printrule(rule, vocab):
	""":returns: a string representation of a rule.

	>>> vocab = Vocabulary(['S', 'NP', 'VP'])
	>>> printrule(BinaryRule(0, 1, 2, -0.5), vocab)
	'S\\tNP\\tVP\\t-0.5'
	>>> printrule(UnaryRule(0, 1, 0.0), vocab)
	'S\\tNP\\t0'
	"""
	return '%s\t%g' % ('\t'.join(vocab.label(a) for a in rule[:-1]),
			rule.score)


def writegrammar(grammar, lexicon=None):
	"""Write a grammar in a simple text file format.

	Binary rules are written first, followed by unary rules, each in order
	of rule index; one rule per line, as produced by :func:`printrule`.
	The lexicon file lists words in sorted order, each followed by its tags
	with their counts.

	:param lexicon: optionally, a :class:`lexicon.SimpleLexicon`.
	:returns: tuple of strings ``(rules, lexicon)``"""
	rules = ['%s\n' % printrule(rule, grammar.vocab)
			for rule in grammar.binary + grammar.unary]
	lex = []
	if lexicon is not None:
		for word in sorted(lexicon.wordtagcounts):
			lex.append(escape(word))
			for tag, count in lexicon.wordtagcounts[word].items():
				lex.append('\t%s %d' % (tag, count))
			lex.append('\n')
	return ''.join(rules), ''.join(lex)


def grammarinfo(grammar):
	"""Return some statistics on a grammar.

	>>> vocab = Vocabulary(['S', 'NP', 'VP', 'ROOT'])
	>>> print(grammarinfo(Grammar(vocab, [BinaryRule(0, 1, 2, 0.0)],
	...		[UnaryRule(3, 0, 0.0)])))
	labels: 4 of which preterminals: 2
	binary rules: 1 unary rules: 1 left children: 1
	max rules per left child: 1 (NP)
	"""
	lhs = {rule.parent for rule in grammar.binary + grammar.unary}
	result = 'labels: %d of which preterminals: %d\n' % (
			len(grammar.vocab), len(grammar.vocab) - len(lhs))
	result += 'binary rules: %d unary rules: %d left children: %d' % (
			len(grammar.binary), len(grammar.unary),
			len(grammar.leftchildren))
	if len(grammar.leftchildren):
		n, left = max((len(grammar.binarybyleft(left)[0]), left)
				for left in grammar.leftchildren.tolist())
		result += '\nmax rules per left child: %d (%s)' % (
				n, grammar.vocab.label(left))
	return result


__all__ = ['treebankgrammar', 'printrule', 'writegrammar', 'grammarinfo']
