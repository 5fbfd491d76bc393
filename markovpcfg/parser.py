"""Parser object that trains a Markovized PCFG and parses sentences with it.

Additionally, a simple command line interface similar to bitpar."""
import sys
import logging
import multiprocessing
from math import exp
from time import process_time
from getopt import gnu_getopt, GetoptError
from . import pcfg, treetransforms
from .grammar import treebankgrammar, grammarinfo
from .lexicon import SimpleLexicon
from .unaryclosure import UnaryClosure
from .treebank import BracketCorpusReader, writetree, WRITERS
from .util import workerfunc, openread, openwrite, setuplogging

SHORTUSAGE = '''
usage: markovpcfg parser [options] <treebank> [input [output]]'''
USAGE = '''Train a Markovized PCFG on a treebank and parse sentences.
%s

<treebank> is a treebank in bracket notation (a glob pattern may be used to
read multiple files); input contains one tokenized sentence per line, with
tokens separated by spaces. Standard in/output is used if not given.

Options:
  --root=X        label of the root node [default: ROOT]
  --rarethreshold=N
                  words seen fewer times are smoothed [default: 10]
  --maxlen=N      only train on trees with at most N words
  --numproc=N     parse N sentences in parallel [default: 1]
  --fmt=FMT       output format; one of: %s [default: bracket]
  --encoding=ENC  encoding of input and output files [default: utf8]
  --functions=X   'remove' or 'leave' function tags of the treebank
                  [default: remove]
  --verbosity=N   0: only warnings; 1: progress; 2: per sentence output
                  [default: 1]''' % (SHORTUSAGE, ', '.join(WRITERS))

DEFAULTS = dict(
	root='ROOT',  # label of the root node of each tree
	rarethreshold=10,  # smooth the lexical scores of rarer words
	maxlen=None,  # limit on length of training sentences
	numproc=1,  # number of worker processes for parsing a corpus
	verbosity=1,
	fmt='bracket',  # output format; see treebank.WRITERS
	encoding='utf8',
	functions='remove')  # strip function tags from treebank labels


class DictObj(object):
	"""Trivial class to wrap a dictionary for reasons of syntactic sugar."""

	def __init__(self, *args, **kwds):
		self.__dict__.update(*args, **kwds)

	def update(self, *args, **kwds):
		"""Update/add more attributes."""
		self.__dict__.update(*args, **kwds)

	def __getattr__(self, name):
		"""Dummy function for suppressing pylint E1101 errors."""
		raise AttributeError('%r instance has no attribute %r.\n'
				'Available attributes: %r' % (
				self.__class__.__name__, name, self.__dict__.keys()))

	def __repr__(self):
		return '%s(%s)' % (self.__class__.__name__,
			',\n\t'.join('%s=%r' % a for a in self.__dict__.items()))


PARAMS = DictObj()  # used for multiprocessing when using CLI of this module


class Parser(object):
	"""A PCFG parser trained on a treebank.

	:param trees: training trees with words as leaves; the trees are not
		modified.
	:param prm: a DictObj with parameters; missing parameters take their
		value from ``DEFAULTS``.

	Training annotates and binarizes the trees, reads off a grammar and a
	lexicon, and computes the unary closure of the grammar."""

	def __init__(self, trees, prm=None):
		self.prm = DictObj(DEFAULTS)
		if prm is not None:
			self.prm.update(vars(prm))
		begin = process_time()
		trees = list(trees)
		if self.prm.maxlen:
			trees = [tree for tree in trees
					if len(tree.leaves()) <= self.prm.maxlen]
		annotated = [treetransforms.annotate(tree) for tree in trees]
		self.grammar = treebankgrammar(annotated)
		self.lexicon = SimpleLexicon(annotated, self.prm.rarethreshold)
		self.closure = UnaryClosure(
				self.grammar.numsymbols, self.grammar.unary)
		logging.info('read off grammar from %d trees; cpu time elapsed: %gs',
				len(trees), process_time() - begin)
		logging.info(grammarinfo(self.grammar))
		logging.info('lexicon: %d words, %d tags; unary closure: %d rules',
				len(self.lexicon), len(self.lexicon.tags()), len(self.closure))
		if self.prm.root not in self.grammar.vocab:
			logging.warning('root label %r does not occur in grammar',
					self.prm.root)

	def parse(self, sent):
		"""Parse a sentence and return a DictObj with the result.

		:param sent: a list of words.
		:returns: a DictObj with attributes ``parsetree`` (the Viterbi parse,
			or a failure tree if there is no parse), ``logprob`` (natural log
			probability of the parse; -inf without parse), ``prob`` (may
			underflow to 0.0 for long sentences), ``noparse``, ``msg``, and
			``elapsedtime``. Use ``noparse`` to test for a failed parse."""
		begin = process_time()
		chart, msg = pcfg.parse(sent, self.grammar, self.lexicon,
				self.closure, self.prm.root)
		noparse = not chart
		logprob = chart.score()
		prob = 0.0 if noparse else exp(logprob)
		parsetree = pcfg.bestparse(chart)
		del chart
		return DictObj(parsetree=parsetree, logprob=logprob, prob=prob,
				noparse=noparse, msg=msg, elapsedtime=process_time() - begin)


def initworker(parser):
	"""Load parser for a worker process."""
	PARAMS.update(parser=parser)


@workerfunc
def mpworker(args):
	"""Parse a single sentence (multiprocessing wrapper)."""
	return worker(args)


def worker(args):
	"""Parse a single sentence."""
	key, sent = args
	result = PARAMS.parser.parse(sent)
	msg = 'parsing %s: %s\n%s; %gs' % (
			key, ' '.join(sent), result.msg, result.elapsedtime)
	output = writetree(result.parsetree, PARAMS.parser.prm.fmt)
	return key, output, result.noparse, result.elapsedtime, msg


def doparsing(parser, sents, out, numproc=1):
	"""Parse sentences and write results to a file, log progress.

	:param sents: an iterable of sentences, each a list of words.
	:param out: a file object to write the parse trees to.
	:returns: the number of sentences without a parse."""
	items = enumerate(sents, 1)
	if numproc == 1:
		initworker(parser)
		unparsed, times = _collect(map(worker, items), out)
	else:
		with multiprocessing.Pool(
				processes=numproc, initializer=initworker,
				initargs=(parser, )) as pool:
			unparsed, times = _collect(pool.imap(mpworker, items), out)
	logging.info('average time per sentence: %gs\nunparsed sentences: %d\n'
			'finished', sum(times) / len(times) if times else 0, unparsed)
	return unparsed


def _collect(results, out):
	"""Write the results of the workers to out, in order."""
	times = []
	unparsed = 0
	for key, output, noparse, sec, msg in results:
		logging.debug(msg)
		if noparse:
			logging.warning('no parse for sentence %s', key)
			unparsed += 1
		out.write(output)
		out.flush()
		times.append(sec)
	return unparsed, times


def readparams(opts):
	"""Return a DictObj with parameters from command line options.

	:param opts: a dictionary of options as returned by ``gnu_getopt``.
	:raises ValueError: for an invalid option value."""
	prm = DictObj(DEFAULTS)
	for name, value in opts.items():
		name = name.lstrip('-')
		if name not in DEFAULTS:
			continue
		if name in ('rarethreshold', 'maxlen', 'numproc', 'verbosity'):
			value = int(value)
			if value < 0 or (value == 0 and name == 'numproc'):
				raise ValueError('expected positive number for --%s' % name)
		prm.update({name: value})
	if prm.fmt not in WRITERS:
		raise ValueError('unrecognized output format: %r' % prm.fmt)
	if prm.functions == 'leave':
		prm.functions = None
	return prm


def main():
	"""Handle command line arguments."""
	options = ('help root= rarethreshold= maxlen= numproc= fmt= encoding= '
			'functions= verbosity=').split()
	try:
		opts, args = gnu_getopt(sys.argv[2:], 'h', options)
		opts = dict(opts)
		prm = readparams(opts)
	except (GetoptError, ValueError) as err:
		print('error:', err, file=sys.stderr)
		print(SHORTUSAGE)
		sys.exit(2)
	if '-h' in opts or '--help' in opts:
		print(USAGE)
		return
	if not 1 <= len(args) <= 3:
		print('error: incorrect number of arguments', file=sys.stderr)
		print(SHORTUSAGE)
		sys.exit(2)
	setuplogging(prm.verbosity)
	corpus = BracketCorpusReader(args[0], encoding=prm.encoding,
			ensureroot=prm.root, functions=prm.functions)
	trees = list(corpus.trees().values())
	if not trees:
		raise ValueError('no trees in treebank: %r' % args[0])
	parser = Parser(trees, prm)
	with openread(args[1] if len(args) >= 2 else '-',
			encoding=prm.encoding) as infile:
		with openwrite(args[2] if len(args) == 3 else '-',
				encoding=prm.encoding) as out:
			doparsing(parser, (line.split() for line in infile
					if line.strip()), out, prm.numproc)


__all__ = ['DEFAULTS', 'DictObj', 'Parser', 'doparsing', 'initworker',
		'readparams']
