"""Markovized binarization of trees and its inverse.

This file contains two main transformations:

 - annotate(): vertical Markovization of order 2 (each node remembers its
   parent) combined with a right-factored binarization with horizontal
   Markovization of order 2 (each intermediate node remembers at most two
   previously generated siblings).
 - unannotate(): splice out the intermediate nodes and strip the
   annotations from the labels, restoring the original n-ary tree.

Intermediate nodes carry the reserved prefix ``@`` and an arrow, e.g.
``@NP^S->_DT_JJ`` is an intermediate node of an ``NP`` under an ``S``, after
generating a ``DT`` and a ``JJ``."""
from .tree import Tree

PARENTCHAR = '^'
INTERMEDIATECHAR = '@'
HISTORYCHAR = '_'


def annotate(tree):
	"""Return a Markovized, binarized copy of tree; tree is not modified.

	>>> tree = Tree('(S (NP (DT the) (JJ big) (NN dog)) (VP (VBZ barks)))')
	>>> print(annotate(tree))  # doctest: +NORMALIZE_WHITESPACE
	(S (NP^S (DT^NP the) (@NP^S->_DT (JJ^NP big) (@NP^S->_DT_JJ
		(NN^NP dog)))) (@S->_NP (VP^S (VBZ^VP barks))))
	"""
	return _binarize(tree.copy(True))


def _binarize(node):
	"""Annotate and binarize a node which may be modified in-place."""
	if not isinstance(node, Tree):
		return node
	parentlabel = baselabel(node.label).replace(INTERMEDIATECHAR, '')
	for child in node:
		if isinstance(child, Tree):
			child.label += PARENTCHAR + parentlabel
	if len(node) < 2:
		return Tree(node.label, [_binarize(child) for child in node])
	# labels of the intermediate nodes, one per generated child
	labels = ['%s%s->%s' % (INTERMEDIATECHAR, node.label, HISTORYCHAR)]
	for child in node[:-1]:
		labels.append(markovize(labels[-1], childlabel(child)))
	# build the right-branching chain bottom-up; the last node is unary
	chain = Tree(labels[-1], [_binarize(node[-1])])
	for n in range(len(node) - 2, 0, -1):
		chain = Tree(labels[n], [_binarize(node[n]), chain])
	return Tree(node.label, [_binarize(node[0]), chain])


def markovize(label, sibling):
	"""Extend an intermediate label with a sibling, keeping two siblings.

	:param label: an intermediate label with zero or more siblings of
		history, e.g., ``@NP->_`` or ``@NP->_DT``.
	:param sibling: the label of the sibling that was generated; only its
		part before the first ``^`` is used.
	:returns: the label for the next intermediate node.
	:raises ValueError: if label contains no history separator.

	>>> markovize('@NP->_', 'DT^NP')
	'@NP->_DT'
	>>> markovize('@NP->_DT', 'JJ')
	'@NP->_DT_JJ'
	>>> markovize('@NP->_DT_JJ', 'NN')
	'@NP->_JJ_NN'
	"""
	if HISTORYCHAR not in label:
		raise ValueError('not an intermediate label: %r' % label)
	sibling = baselabel(sibling)
	parts = label.rstrip(HISTORYCHAR).split(HISTORYCHAR)
	if len(parts) == 1:
		return label + sibling
	elif len(parts) == 2:
		return label + HISTORYCHAR + sibling
	return HISTORYCHAR.join((parts[0], parts[-1], sibling))


def unannotate(tree):
	"""Return a copy of tree with intermediate nodes and annotations removed.

	>>> tree = Tree('(S (NP (DT the) (JJ big) (NN dog)) (VP (VBZ barks)))')
	>>> unannotate(annotate(tree)) == tree
	True
	"""
	return normalizelabels(splicenodes(tree.copy(True), isintermediate))


def splicenodes(tree, pred):
	"""Remove each node whose label satisfies pred; its children take its place.

	Modifies tree in-place. The root itself is never removed.

	>>> print(splicenodes(Tree('(S (X (A a) (Y (B b))) (C c))'),
	...		lambda label: label in ('X', 'Y')))
	(S (A a) (B b) (C c))
	"""
	tree[:] = _splicechildren(tree, pred)
	return tree


def _splicechildren(node, pred):
	"""Return the children of node after splicing its descendants."""
	result = []
	for child in node:
		if isinstance(child, Tree):
			child[:] = _splicechildren(child, pred)
			if pred(child.label):
				result.extend(child)
				continue
		result.append(child)
	return result


def normalizelabels(tree):
	"""Cut each internal label at its first annotation character.

	Annotations start with ``^`` (parent) or ``-`` (function tags, the
	arrow of an intermediate label). A label that starts with ``-`` such as
	``-NONE-`` keeps that part. Modifies tree in-place.

	>>> print(normalizelabels(Tree('(S (NP-SBJ^S (-NONE-^NP *)) (-LRB- -LRB-))')))
	(S (NP (-NONE- *)) (-LRB- -LRB-))
	"""
	for node in tree.subtrees():
		cut = node.label.find(PARENTCHAR)
		dash = node.label.find('-', 1)
		if dash > 0 and (cut == -1 or dash < cut) and node.label[0] != '-':
			cut = dash
		if cut > 0:
			node.label = node.label[:cut]
	return tree


def baselabel(label):
	"""Return label without its parent annotation.

	>>> baselabel('NP^S'), baselabel('@VP^S->_VBZ')
	('NP', '@VP')
	"""
	return label.split(PARENTCHAR, 1)[0]


def childlabel(node):
	"""Return the label of a node, or the word itself for a leaf."""
	return node.label if isinstance(node, Tree) else node


def isintermediate(label):
	"""Test whether label belongs to a node introduced by binarization."""
	return label.startswith(INTERMEDIATECHAR)


__all__ = ['annotate', 'markovize', 'unannotate', 'splicenodes',
		'normalizelabels', 'baselabel', 'childlabel', 'isintermediate']
