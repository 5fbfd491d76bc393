"""Closure of unary rules: the best chain of unary rules between two symbols.

The chart parser applies unary rules only through the closure, so that a
chain of unary rules costs a single step per cell. Rules are closed with a
Floyd-Warshall pass over the symbols occurring in unary rules; since scores
are log probabilities, best paths never contain cycles, and a reflexive rule
``X -> X`` can never improve on the identity. Each symbol is reachable from
itself through the identity, with a score of 0."""
import logging
from collections import defaultdict
import numpy as np


class UnaryClosure(object):
	"""Best unary paths between all pairs of symbols.

	:param numsymbols: the number of symbols; the identity is added for each.
	:param unaryrules: a sequence of :class:`containers.UnaryRule`.

	>>> from markovpcfg.containers import UnaryRule
	>>> closure = UnaryClosure(4, [UnaryRule(0, 1, -1.0),
	...		UnaryRule(1, 2, -1.0), UnaryRule(0, 2, -3.0)])
	>>> closure.closedrulesbychild(2)
	[(0, -2.0), (1, -1.0), (2, 0.0)]
	>>> closure.pathfor(0, 2), closure.pathfor(3, 3), closure.pathfor(2, 0)
	((0, 1, 2), (3, 3), None)
	"""

	def __init__(self, numsymbols, unaryrules):
		self.numsymbols = numsymbols
		best = {}  # (parent, child) -> score of best path
		for rule in unaryrules:
			if rule.parent == rule.child:
				continue
			key = rule.parent, rule.child
			if key not in best or rule.score > best[key]:
				best[key] = rule.score
		parentsof = defaultdict(set)
		childrenof = defaultdict(set)
		for parent, child in best:
			parentsof[child].add(parent)
			childrenof[parent].add(child)
		via = {}  # (parent, child) -> intermediate symbol of best path
		for mid in sorted(set(parentsof) | set(childrenof)):
			for parent in sorted(parentsof[mid]):
				for child in sorted(childrenof[mid]):
					if parent == child:
						continue
					score = best[parent, mid] + best[mid, child]
					if (parent, child) not in best or score > best[
							parent, child]:
						best[parent, child] = score
						via[parent, child] = mid
						parentsof[child].add(parent)
						childrenof[parent].add(child)
		self.scores = best
		self.paths = {}
		for parent, child in best:
			self.paths[parent, child] = self._expand(parent, child, via)
		bychild = defaultdict(list)
		for (parent, child), score in best.items():
			bychild[child].append((parent, score))
		self._bychild = []
		for child in range(numsymbols):
			rules = sorted(bychild[child] + [(child, 0.0)])
			self._bychild.append((
					np.array([parent for parent, _ in rules], dtype=np.intp),
					np.array([score for _, score in rules], dtype=np.float64)))
		logging.debug('unary closure: %d unary rules, %d closed rules',
				len(unaryrules), len(self))

	def _expand(self, parent, child, via):
		"""Expand the best path from parent to child via recorded midpoints."""
		path = [parent]
		agenda = [(parent, child)]
		while agenda:
			a, b = agenda.pop()
			if (a, b) in via:
				mid = via[a, b]
				agenda.append((mid, b))
				agenda.append((a, mid))
			else:
				path.append(b)
			if len(path) > self.numsymbols + 1:
				raise ValueError('cyclic unary path from %d to %d' % (
						parent, child))
		return tuple(path)

	def closedrulesbychild(self, child):
		""":returns: a list of ``(parent, score)`` for every parent reachable
		from ``child``, in ascending order of parent; includes the identity."""
		parents, scores = self._bychild[child]
		return list(zip(parents.tolist(), scores.tolist()))

	def arraysbychild(self, child):
		""":returns: the closed rules for ``child`` as a tuple of arrays
		``(parents, scores)``."""
		return self._bychild[child]

	def pathfor(self, parent, child):
		""":returns: a tuple of symbols from ``parent`` down to ``child``,
		inclusive; ``(X, X)`` for the identity; None if there is no path."""
		if parent == child and 0 <= parent < self.numsymbols:
			return (parent, child)
		return self.paths.get((parent, child))

	def score(self, parent, child):
		"""Return the score of the best path, or -inf if there is none."""
		if parent == child and 0 <= parent < self.numsymbols:
			return 0.0
		return self.scores.get((parent, child), float('-inf'))

	def __len__(self):
		return len(self.scores) + self.numsymbols


__all__ = ['UnaryClosure']
