"""Evaluation of parse trees with labeled brackets, similar to EVALB [1].

Scores are computed over multisets of labeled brackets ``(label, span)``,
where a span is a pair ``(start, end)`` of word positions. Preterminals and
the root node are not counted.

[1] http://nlp.cs.nyu.edu/evalb/"""
import sys
from getopt import gnu_getopt, GetoptError
from decimal import Decimal, InvalidOperation
from collections import Counter  # == multiset
from .tree import Tree
from .treebank import BracketCorpusReader

SHORTUSAGE = 'Usage: markovpcfg eval <gold> <parses> [options]'
USAGE = '''Evaluate parse trees against gold trees; similar to EVALB.
%s

Both files are treebanks in bracket notation; trees are paired in order.
Options:
  --goldenc=ENC, --parsesenc=ENC
                   encoding of the files [default: utf8]
  --functions=X    'remove' or 'leave' function tags [default: remove]
  --root=X         label of the root node [default: ROOT]
  --verbose        print scores for each sentence''' % SHORTUSAGE

HEADER = '''
   Sentence                 Matched   Brackets            Corr   POS
  ID Length  Recall  Precis Bracket   gold   cand  Words  POS  Accur.\
'''.splitlines()

FAILURELEAF = 'JUNK'


class Evaluator(object):
	"""Incremental evaluator for syntactic trees.

	>>> evaluator = Evaluator()
	>>> gold = Tree('(ROOT (S (NP (NN dog)) (VP (VBZ barks))))')
	>>> result = evaluator.add(1, gold, gold.copy(True))
	>>> print(evaluator.summary().splitlines()[7])
	labeled f-measure:         100.00
	"""

	def __init__(self, dellabel=('ROOT', ), keylen=8, verbose=False):
		"""Initialize evaluator object.

		:param dellabel: labels of brackets that are not counted.
		:param keylen: the length of the longest sentence ID, for padding
			purposes.
		:param verbose: if True, print a line for each added sentence."""
		self.dellabel = dellabel
		self.keylen = keylen
		self.verbose = verbose
		self.acc = EvalAccumulator()
		if verbose:
			for a in HEADER:
				print(' ' * (self.keylen - 4) + a)
			print('', '_' * ((self.keylen - 5) + len(HEADER[-1])))

	def add(self, n, gtree, ctree):
		"""Add a pair of gold and candidate trees to the evaluation.

		:param n: a unique identifier for this sentence.
		:param gtree, ctree: Tree objects with words as leaves; a failure tree
			(the root over the leaf ``JUNK``) counts as a sentence without
			parse.
		:returns: a ``TreePairResult`` object."""
		treepair = TreePairResult(n, gtree, ctree, self.dellabel)
		self.acc.add(treepair)
		if self.verbose:
			print(treepair.info('%%%ds  ' % self.keylen))
		return treepair

	def summary(self):
		""":returns: a string with an overview of scores for all sentences."""
		acc = self.acc
		msg = ['%s' % ' Summary (ALL) '.center(35, '_'),
				'number of sentences:       %6d' % acc.sentcount,
				'longest sentence:          %6d' % acc.maxlenseen,
				'gold brackets:             %6d' % sum(acc.goldb.values()),
				'cand. brackets:            %6d' % sum(acc.candb.values()),
				'labeled recall:            %s' % (
					nozerodiv(lambda: recall(acc.goldb, acc.candb))),
				'labeled precision:         %s' % (
					nozerodiv(lambda: precision(acc.goldb, acc.candb))),
				'labeled f-measure:         %s' % (
					nozerodiv(lambda: f_measure(acc.goldb, acc.candb))),
				'exact match:               %s' % (
					nozerodiv(lambda: acc.exact / acc.sentcount)),
				'pos accuracy:              %s' % (
					nozerodiv(lambda: accuracy(acc.goldpos, acc.candpos))),
				'no parses:                 %6d' % acc.noparse]
		return '\n'.join(msg)


class TreePairResult(object):
	"""Holds the evaluation result of a pair of trees."""

	def __init__(self, n, gtree, ctree, dellabel=('ROOT', )):
		"""Construct a pair of gold and candidate trees for evaluation."""
		self.n = n
		self.gsent = gtree.leaves()
		self.gpos = gtree.pos()
		self.gbrack = bracketings(gtree, dellabel)
		self.noparse = (ctree.leaves() == [FAILURELEAF]
				and self.gsent != [FAILURELEAF])
		if self.noparse:
			self.cpos = [(word, None) for word in self.gsent]
			self.cbrack = Counter()
		else:
			if ctree.leaves() != self.gsent:
				raise ValueError('candidate & gold sentences do not match:\n'
						'%r // %r' % (' '.join(ctree.leaves()),
						' '.join(self.gsent)))
			self.cpos = ctree.pos()
			self.cbrack = bracketings(ctree, dellabel)

	def scores(self):
		"""Return precision, recall, f-measure for this pair of trees."""
		return dict(lr=nozerodiv(lambda: recall(self.gbrack, self.cbrack)),
				lp=nozerodiv(lambda: precision(self.gbrack, self.cbrack)),
				lf=nozerodiv(lambda: f_measure(self.gbrack, self.cbrack)),
				tag=nozerodiv(lambda: accuracy(self.gpos, self.cpos)))

	def info(self, fmt='%5s  '):
		"""Return a line with scores for this sentence."""
		scores = self.scores()
		return ' '.join((fmt % self.n + '%5d' % len(self.gsent),
				scores['lr'], scores['lp'],
				'%6d %6d %6d %6d %6d' % (
					sum((self.gbrack & self.cbrack).values()),
					sum(self.gbrack.values()), sum(self.cbrack.values()),
					len(self.gsent),
					sum(a == b for a, b in zip(self.gpos, self.cpos))),
				scores['tag']))


class EvalAccumulator(object):
	"""Collect scores of evaluation."""

	def __init__(self):
		self.maxlenseen, self.sentcount = Decimal(0), Decimal(0)
		self.exact = Decimal(0)
		self.noparse = 0
		self.goldb, self.candb = Counter(), Counter()  # all brackets
		self.goldpos, self.candpos = [], []

	def add(self, pair):
		"""Add scores from given TreePairResult object."""
		self.sentcount += 1
		if self.maxlenseen < len(pair.gsent):
			self.maxlenseen = len(pair.gsent)
		self.candb.update((pair.n, a) for a in pair.cbrack.elements())
		self.goldb.update((pair.n, a) for a in pair.gbrack.elements())
		if pair.cbrack == pair.gbrack and not pair.noparse:
			self.exact += 1
		self.noparse += pair.noparse
		self.goldpos.extend(pair.gpos)
		self.candpos.extend(pair.cpos)

	def scores(self):
		"""Return a dictionary with running scores for all added sentences."""
		return dict(lr=nozerodiv(lambda: recall(self.goldb, self.candb)),
				lp=nozerodiv(lambda: precision(self.goldb, self.candb)),
				lf=nozerodiv(lambda: f_measure(self.goldb, self.candb)),
				ex=nozerodiv(lambda: self.exact / self.sentcount),
				tag=nozerodiv(lambda: accuracy(self.goldpos, self.candpos)))


def main():
	"""Command line interface for evaluation."""
	options = ('help', 'verbose', 'goldenc=', 'parsesenc=', 'functions=',
			'root=')
	try:
		opts, args = gnu_getopt(sys.argv[2:], 'h', options)
	except GetoptError as err:
		print('error:', err, file=sys.stderr)
		print(SHORTUSAGE)
		sys.exit(2)
	opts = dict(opts)
	if '-h' in opts or '--help' in opts:
		print(USAGE)
		return
	if len(args) != 2:
		print('error: Wrong number of arguments.', file=sys.stderr)
		print(SHORTUSAGE)
		sys.exit(2)
	goldfile, parsesfile = args
	functions = opts.get('--functions', 'remove')
	functions = None if functions == 'leave' else functions
	root = opts.get('--root', 'ROOT')
	gold = BracketCorpusReader(goldfile,
			encoding=opts.get('--goldenc', 'utf8'),
			ensureroot=root, functions=functions)
	parses = BracketCorpusReader(parsesfile,
			encoding=opts.get('--parsesenc', 'utf8'),
			ensureroot=root, functions=functions)
	goldtrees = gold.trees()
	candtrees = parses.trees()
	if not goldtrees:
		raise ValueError('no trees in gold file')
	if not candtrees:
		raise ValueError('no trees in parses file')
	evaluator = Evaluator((root, ), max(len(str(key)) for key in candtrees),
			'--verbose' in opts)
	for n, ctree in candtrees.items():
		if n not in goldtrees:
			raise ValueError('no gold tree for sentence %s' % n)
		evaluator.add(n, goldtrees[n], ctree)
	print(evaluator.summary())


def bracketings(tree, dellabel=('ROOT', )):
	"""Return the multiset of labeled bracketings for a tree.

	For each phrasal node, the multiset contains a tuple with the label and
	the span ``(start, end)`` of words it dominates. The argument ``dellabel``
	excludes nodes with these labels, e.g., the root node.

	>>> tree = Tree('(ROOT (S (NP (DT the) (NN dog)) (VP (VBZ barks))))')
	>>> sorted(bracketings(tree).items())
	[(('NP', (0, 2)), 1), (('S', (0, 3)), 1), (('VP', (2, 3)), 1)]
	"""
	result = Counter()
	_bracketings(tree, 0, dellabel, result)
	return result


def _bracketings(node, start, dellabel, result):
	"""Collect brackets of node and its descendants; return end of span."""
	end = start
	for child in node:
		if isinstance(child, Tree):
			end = _bracketings(child, end, dellabel, result)
		else:
			end += 1
	# nonempty, not a preterminal
	if node and isinstance(node[0], Tree) and node.label not in dellabel:
		result[node.label, (start, end)] += 1
	return end


# If the goldfile contains n constituents for the same span, and the parsed
# file contains m constituents with that nonterminal, the scorer works as
# follows:
#
# i) If m>n, then the precision is n/m, recall is 100%
# ii) If n>m, then the precision is 100%, recall is m/n.
# iii) If n==m, recall and precision are both 100%.
def recall(reference, candidate):
	"""Get recall score for two multisets."""
	if not reference:
		return Decimal('NaN')
	return Decimal(sum(min(reference[a], candidate[a])
			for a in reference & candidate)) / sum(reference.values())


def precision(reference, candidate):
	"""Get precision score for two multisets."""
	if not candidate:
		return Decimal('NaN')
	return Decimal(sum(min(reference[a], candidate[a])
			for a in reference & candidate)) / sum(candidate.values())


def f_measure(reference, candidate, alpha=Decimal(0.5)):
	"""Get F-measure of precision and recall for two multisets.

	The default weight ``alpha=0.5`` corresponds to the F_1-measure."""
	p = precision(reference, candidate)
	r = recall(reference, candidate)
	if p == 0 or r == 0:
		return Decimal('NaN')
	return Decimal(1) / (alpha / p + (1 - alpha) / r)


def accuracy(reference, candidate):
	"""Compute fraction of equivalent pairs in two sequences.

	In particular, return the fraction of indices
	``0<i<=len(test)`` such that ``test[i] == reference[i]``."""
	if len(reference) != len(candidate):
		raise ValueError('Sequences must have the same length.')
	return Decimal(sum(a == b for a, b in zip(reference, candidate))
			) / len(reference)


def nozerodiv(func):
	"""Return ``func()`` as 6-character string but catch zero division."""
	try:
		result = func()
	except (ZeroDivisionError, InvalidOperation):
		return ' 0DIV!'
	return '  None' if result is None else '%6.2f' % (100 * result)


__all__ = ['Evaluator', 'TreePairResult', 'EvalAccumulator', 'bracketings',
		'recall', 'precision', 'f_measure', 'accuracy', 'nozerodiv']
