"""Labeled, ordered trees for constituency parses."""
# This is an adaptation of the original tree.py file from NLTK.
# Removed: probabilistic, parented & immutable trees, tree positions,
# drawing; leaves are words instead of indices.
# Original notice:
# Natural Language Toolkit: Text Trees
#
# Copyright (C) 2001-2010 NLTK Project
# Author: Edward Loper <edloper@gradient.cis.upenn.edu>
#         Steven Bird <sb@csse.unimelb.edu.au>
# URL: <http://www.nltk.org/>
# For license information, see LICENSE.TXT
import re


class Tree(object):
	"""A mutable, labeled, n-ary tree structure.

	A tree's children are a list of leaves and subtrees, where a leaf is a
	word (a string) and a subtree is a nested Tree. Internal nodes carry a
	string label, such as "NP" or "VP".

	The constructor can be called in two ways:

	- ``Tree(label, children)`` constructs a new tree with the specified label
		and list of children.
	- ``Tree(s)`` constructs a new tree by parsing the bracketed string s.
		Equivalent to calling the class method ``Tree.parse(s)``.

	>>> tree = Tree('(S (NP Mary) (VP (VB is) (JJ rich)))')
	>>> print(tree[1])
	(VP (VB is) (JJ rich))
	>>> tree.leaves()
	['Mary', 'is', 'rich']
	"""
	__slots__ = ('label', 'children')

	def __new__(cls, label_or_str=None, children=None):
		if label_or_str is None:
			return object.__new__(cls)  # used by copy.deepcopy
		if children is None:
			if not isinstance(label_or_str, str):
				raise TypeError("%s: Expected a label and child list "
						"or a single string; got: %s" % (
						cls.__name__, type(label_or_str)))
			return cls.parse(label_or_str)
		if isinstance(children, str) or not hasattr(children, '__iter__'):
			raise TypeError("%s() argument 2 should be a list, not a "
					"string" % cls.__name__)
		return object.__new__(cls)

	def __init__(self, label_or_str, children=None):
		# When __new__ delegated to Tree.parse(), __init__ has already been
		# called on the result; children is None in that case.
		if children is None:
			return
		self.label = label_or_str
		self.children = list(children)

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Tree):
			return False
		return (self.label == other.label
				and self.children == other.children)

	def __ne__(self, other):
		return not self.__eq__(other)

	__hash__ = None

	# === Delegated list operations ==============================
	def append(self, child):
		"""Append ``child`` to this node."""
		self.children.append(child)

	def extend(self, children):
		"""Extend this node's children with an iterable."""
		self.children.extend(children)

	def insert(self, index, child):
		"""Insert child at integer index."""
		self.children.insert(index, child)

	def pop(self, index=-1):
		"""Remove child at specified integer index (or default to last)."""
		return self.children.pop(index)

	def __iter__(self):
		return self.children.__iter__()

	def __len__(self):
		return self.children.__len__()

	def __getitem__(self, index):
		return self.children.__getitem__(index)

	def __setitem__(self, index, value):
		self.children.__setitem__(index, value)

	def __delitem__(self, index):
		self.children.__delitem__(index)

	# === Basic tree operations =================================
	def leaves(self):
		""":returns: list containing this tree's leaves, left to right."""
		leaves = []
		for child in self.children:
			if isinstance(child, Tree):
				leaves.extend(child.leaves())
			else:
				leaves.append(child)
		return leaves

	def height(self):
		""":returns: The longest distance from this node to a leaf node.

		The height of a tree containing only leaves is 2."""
		max_child_height = 0
		for child in self.children:
			if isinstance(child, Tree):
				max_child_height = max(max_child_height, child.height())
			else:
				max_child_height = max(max_child_height, 1)
		return 1 + max_child_height

	def subtrees(self, condition=None):
		"""Yield subtrees of this tree in depth-first, pre-order traversal.

		:param condition: a function ``Tree -> bool`` to filter which nodes are
			yielded (does not affect whether children are visited).

		NB: store traversal as list before any structural modifications."""
		agenda = [self]
		while agenda:
			node = agenda.pop()
			if isinstance(node, Tree):
				if condition is None or condition(node):
					yield node
				agenda.extend(node[::-1])

	def postorder(self, condition=None):
		"""A generator that does a post-order traversal of this tree.

		NB: store traversal as list before any structural modifications."""
		agenda = [self]
		visited = set()
		while agenda:
			node = agenda[-1]
			if not isinstance(node, Tree):
				agenda.pop()
			elif id(node) in visited:
				agenda.pop()
				if condition is None or condition(node):
					yield node
			else:
				agenda.extend(node[::-1])
				visited.add(id(node))

	def pos(self):
		""":returns: a list of ``(word, tag)`` tuples for the preterminals of
			this tree, left to right.

		>>> Tree('(S (NP (DT the) (NN dog)) (VP (VBZ barks)))').pos()
		[('the', 'DT'), ('dog', 'NN'), ('barks', 'VBZ')]"""
		return [(node[0], node.label)
				for node in self.subtrees(ispreterminal)]

	def copy(self, deep=False):
		"""Create a copy of this tree; shares subtrees unless ``deep``."""
		if not deep:
			return self.__class__(self.label, self)
		return self.__class__(self.label, [child.copy(True)
				if isinstance(child, Tree) else child for child in self])

	# === Parsing ===============================================
	@classmethod
	def parse(cls, s, parse_label=None, parse_leaf=None):
		"""Parse a bracketed tree string and return the resulting tree.

		Trees are represented as nested bracketings, such as:
		``(S (NP (NNP John)) (VP (V runs)))``

		:param parse_label, parse_leaf: If specified, these functions are
			applied to the substrings of s corresponding to labels and leaves
			(respectively) to obtain the values for those labels and leaves.
		:returns: A tree corresponding to the string representation s.
		:raises ValueError: when the brackets are not balanced or there is
			not exactly one tree."""
		token_re = re.compile(r'\(\s*([^\s()]+)?|\)|([^\s()]+)')
		stack = [(None, [])]  # list of (label, children) tuples
		for match in token_re.finditer(s):
			token = match.group()
			if token[0] == '(':  # Beginning of a tree/subtree
				if len(stack) == 1 and len(stack[0][1]) > 0:
					cls._parse_error(s, match, 'end-of-string')
				label = token[1:].lstrip()
				if parse_label is not None:
					label = parse_label(label)
				stack.append((label, []))
			elif token == ')':  # End of a tree/subtree
				if len(stack) == 1:
					if len(stack[0][1]) == 0:
						cls._parse_error(s, match, '(')
					else:
						cls._parse_error(s, match, 'end-of-string')
				label, children = stack.pop()
				stack[-1][1].append(cls(label, children))
			else:  # Leaf node
				if len(stack) == 1:
					cls._parse_error(s, match, '(')
				if parse_leaf is not None:
					token = parse_leaf(token)
				stack[-1][1].append(token)
		if len(stack) > 1:
			cls._parse_error(s, 'end-of-string', ')')
		elif len(stack[0][1]) == 0:
			cls._parse_error(s, 'end-of-string', '(')
		return stack[0][1][0]

	@classmethod
	def _parse_error(cls, orig, match, expecting):
		"""Raise a friendly error message when parsing a tree string fails.

		:param orig: The string we're parsing.
		:param match: regexp match of the problem token.
		:param expecting: what we expected to see instead."""
		if match == 'end-of-string':
			pos, token = len(orig), 'end-of-string'
		else:
			pos, token = match.start(), match.group()
		msg = '%s.parse(): expected %r but got %r\n%sat index %d.' % (
			cls.__name__, expecting, token, ' ' * 12, pos)
		s = orig.replace('\n', ' ').replace('\t', ' ')
		offset = pos
		if len(s) > pos + 10:
			s = s[:pos + 10] + '...'
		if pos > 10:
			s = '...' + s[pos - 10:]
			offset = 13
		msg += '\n%s"%s"\n%s^' % (' ' * 16, s, ' ' * (17 + offset))
		raise ValueError(msg)

	# === String Representations ================================
	def __repr__(self):
		childstr = ", ".join(repr(c) for c in self)
		return '%s(%r, [%s])' % (self.__class__.__name__, self.label, childstr)

	def __str__(self):
		return self._pprint_flat()

	def pprint(self, margin=70, indent=0):
		""":returns: A pretty-printed string representation of this tree.

		:param margin: The right margin at which to do line-wrapping.
		:param indent: The indentation level at which printing begins."""
		s = self._pprint_flat()
		if len(s) + indent < margin:
			return s
		s = '(%s' % self.label
		for child in self.children:
			if isinstance(child, Tree):
				s += '\n' + ' ' * (indent + 2) + child.pprint(margin,
						indent + 2)
			else:
				s += '\n' + ' ' * (indent + 2) + escape(child)
		return s + ')'

	def _pprint_flat(self):
		"""Pretty-printing helper function."""
		childstrs = [child._pprint_flat() if isinstance(child, Tree)
				else escape(child) for child in self.children]
		return '(%s %s)' % (self.label, ' '.join(childstrs))


def isleaf(node):
	"""Test whether node is a leaf (a word), not a Tree."""
	return not isinstance(node, Tree)


def ispreterminal(node):
	"""Test whether node is a tree with a single leaf as child.

	>>> ispreterminal(Tree('(NN dog)')), ispreterminal(Tree('(NP (NN dog))'))
	(True, False)"""
	return (isinstance(node, Tree) and len(node) == 1
			and not isinstance(node[0], Tree))


def isphrasal(node):
	"""Test whether node is a tree whose children are all trees."""
	return (isinstance(node, Tree) and len(node) > 0
			and all(isinstance(child, Tree) for child in node))


def writebrackettree(tree):
	"""Return a tree in bracket notation on a single line."""
	return '%s\n' % tree


def escape(text):
	"""Escape all occurrences of parentheses and replace None with ''."""
	return '' if text is None else text.replace(
			'(', '#LRB#').replace(')', '#RRB#')


def unescape(text):
	"""Reverse escaping of parentheses."""
	return text.replace('#LRB#', '(').replace('#RRB#', ')')


__all__ = ['Tree', 'isleaf', 'ispreterminal', 'isphrasal',
		'writebrackettree', 'escape', 'unescape']
