"""Command-line interfaces to modules."""
from sys import argv, stderr
from sys import exit as sysexit

COMMANDS = {
		'parser': 'Train a Markovized PCFG on a treebank and parse sentences.',
		'grammar': 'Read off a grammar and lexicon from a treebank.',
		'treetransforms': 'Annotate and binarize trees, or undo this.',
		'eval': 'Evaluate parse trees; similar to EVALB.',
	}


def main():
	"""Expose command-line interfaces."""
	from os.path import basename
	thiscmd = basename(argv[0])
	if len(argv) == 2 and argv[1] in ('-v', '--version'):
		from markovpcfg import __version__
		print(__version__)
	elif len(argv) <= 1 or argv[1] not in COMMANDS:
		print('Usage: %s <command> [arguments]\n' % thiscmd, file=stderr)
		print('Command is one of:', file=stderr)
		for a, b in COMMANDS.items():
			print('   %s  %s' % (a.ljust(15), b))
		print('for additional instructions issue: %s <command> --help'
			% thiscmd, file=stderr)
		sysexit(2)
	else:
		cmd = argv[1]
		# use the CLI defined here, or default to the module's main function.
		try:
			func = globals()[cmd]
		except KeyError:
			func = getattr(__import__('markovpcfg.%s' % cmd,
					fromlist=['main']), 'main')
		func()


def treetransforms():
	"""Annotate and binarize trees, or undo this.
Usage: markovpcfg treetransforms [input [output]] --annotate|--unannotate \
[options]
where input and output are treebanks in bracket notation; standard in/output
is used if not given.

Options:
  --annotate       add parent annotation and binarize with markovization
  --unannotate     remove intermediate nodes and annotations
  --fmt=FMT        output format: bracket, pprint, tokens [default: bracket]
  --enc=ENC        encoding of input and output [default: utf8]
  --functions=X    'remove' or 'leave' function tags [default: leave]
  --ensureroot=X   add a root node with this label if necessary"""
	from getopt import gnu_getopt, GetoptError
	from . import treebank
	from .treetransforms import annotate, unannotate
	from .util import openwrite
	flags = ('help', 'annotate', 'unannotate')
	options = ('fmt=', 'enc=', 'functions=', 'ensureroot=')
	try:
		opts, args = gnu_getopt(argv[2:], 'h', flags + options)
		if len(args) > 2:
			raise GetoptError('expected 0, 1, or 2 positional arguments')
	except GetoptError as err:
		print('error:', err, file=stderr)
		print(treetransforms.__doc__)
		sysexit(2)
	opts = dict(opts)
	if '-h' in opts or '--help' in opts:
		print(treetransforms.__doc__)
		return
	if ('--annotate' in opts) == ('--unannotate' in opts):
		print('error: specify exactly one of --annotate, --unannotate',
				file=stderr)
		print(treetransforms.__doc__)
		sysexit(2)
	fmt = opts.get('--fmt', 'bracket')
	if fmt not in treebank.WRITERS:
		print('error: unrecognized output format: %r\navailable formats: %s'
				% (fmt, ' '.join(treebank.WRITERS)), file=stderr)
		sysexit(2)
	functions = opts.get('--functions')
	functions = None if functions == 'leave' else functions
	encoding = opts.get('--enc', 'utf8')
	transform = annotate if '--annotate' in opts else unannotate
	corpus = treebank.BracketCorpusReader(
			args[0] if args else '-',
			encoding=encoding,
			ensureroot=opts.get('--ensureroot'),
			functions=functions)
	cnt = 0
	with openwrite(args[1] if len(args) == 2 else '-',
			encoding=encoding) as outfile:
		for _key, tree in corpus.itertrees():
			outfile.write(treebank.writetree(transform(tree), fmt))
			cnt += 1
	print('%s: transformed %d trees' % (args[0] if args else 'stdin', cnt),
			file=stderr)


def grammar():
	"""Read off a grammar and lexicon from a treebank.
Usage: markovpcfg grammar <treebank> <outprefix> [options]
The trees are annotated and binarized; writes <outprefix>.rules and
<outprefix>.lex, and prints statistics on the grammar.

Options:
  --inputenc=ENC   encoding of the treebank [default: utf8]
  --functions=X    'remove' or 'leave' function tags [default: remove]
  --root=X         label of the root node [default: ROOT]
  --rarethreshold=N
                   words seen fewer times are smoothed [default: 10]"""
	import logging
	from getopt import gnu_getopt, GetoptError
	from .treebank import BracketCorpusReader
	from .treetransforms import annotate
	from .grammar import treebankgrammar, writegrammar, grammarinfo
	from .lexicon import SimpleLexicon
	from .util import openwrite
	logging.basicConfig(level=logging.DEBUG, format='%(message)s')
	options = ('help', 'inputenc=', 'functions=', 'root=', 'rarethreshold=')
	try:
		opts, args = gnu_getopt(argv[2:], 'h', options)
		opts = dict(opts)
		if '-h' in opts or '--help' in opts:
			print(grammar.__doc__)
			return
		treebankfile, outprefix = args  # pylint: disable=unbalanced-tuple-unpacking
		rarethreshold = int(opts.get('--rarethreshold', 10))
	except (GetoptError, ValueError) as err:
		print('error: %r' % err, file=stderr)
		print(grammar.__doc__)
		sysexit(2)
	functions = opts.get('--functions', 'remove')
	functions = None if functions == 'leave' else functions
	corpus = BracketCorpusReader(treebankfile,
			encoding=opts.get('--inputenc', 'utf8'),
			ensureroot=opts.get('--root', 'ROOT'),
			functions=functions)
	trees = [annotate(tree) for tree in corpus.trees().values()]
	if not trees:
		raise ValueError('no trees in treebank: %r' % treebankfile)
	xgrammar = treebankgrammar(trees)
	lexicon = SimpleLexicon(trees, rarethreshold)
	rules, lex = writegrammar(xgrammar, lexicon)
	with openwrite(outprefix + '.rules') as rulesfile:
		rulesfile.write(rules)
	with openwrite(outprefix + '.lex') as lexfile:
		lexfile.write(lex)
	logging.info('wrote grammar to %s.{rules,lex}', outprefix)
	logging.info(grammarinfo(xgrammar))


__all__ = ['COMMANDS', 'main', 'treetransforms', 'grammar']
