"""Unit tests for markovpcfg modules."""
# pylint: disable=C0111,W0232
import io
import sys
from math import exp, isinf, isnan
from decimal import Decimal
from collections import defaultdict
import numpy as np
import pytest
from markovpcfg import pcfg, cli
from markovpcfg.tree import Tree, ispreterminal, isleaf, isphrasal, \
		escape, unescape
from markovpcfg.treebank import BracketCorpusReader, segmentbrackets, \
		writetree
from markovpcfg.treetransforms import annotate, unannotate, markovize, \
		splicenodes, isintermediate
from markovpcfg.containers import Vocabulary, Grammar, BinaryRule, UnaryRule
from markovpcfg.grammar import treebankgrammar, writegrammar
from markovpcfg.lexicon import SimpleLexicon
from markovpcfg.unaryclosure import UnaryClosure
from markovpcfg.parser import Parser, DictObj, doparsing, readparams
from markovpcfg.eval import Evaluator, bracketings, precision, recall, \
		f_measure

TRAIN = '''(ROOT (S (NP (DT the) (NN dog)) (VP (VBZ barks))))
(ROOT (S (NP (DT a) (NN cat)) (VP (VBZ sleeps))))
'''


class DictLexicon(object):
	"""Lexicon with fixed scores for (word, tag) pairs."""

	def __init__(self, scores, default=float('-inf')):
		self.scores = scores
		self.default = default

	def score(self, word, tag):
		return self.scores.get((word, tag), self.default)


def makeparser(vocab, binary, unary):
	grammar = Grammar(Vocabulary(vocab),
			[BinaryRule(*a) for a in binary], [UnaryRule(*a) for a in unary])
	return grammar, UnaryClosure(grammar.numsymbols, grammar.unary)


def trainparser(treebank=TRAIN, **kwds):
	trees = [Tree(line) for line in treebank.splitlines() if line.strip()]
	return Parser(trees, DictObj(kwds) if kwds else None)


class Test_tree(object):
	def test_traversals(self):
		tree = Tree('(S (NP (DT the) (NN dog)) (VP (VBZ barks)))')
		assert [node.label for node in tree.postorder()] == [
				'DT', 'NN', 'NP', 'VBZ', 'VP', 'S']
		assert [node.label for node in tree.subtrees(isphrasal)] == [
				'S', 'NP', 'VP']
		assert tree.height() == 4
		assert isleaf(tree[0][0][0]) and not isleaf(tree[0])
		assert not isphrasal(tree[1][0])
		copy = tree.copy(True)
		copy[0].label = 'X'
		assert tree[0].label == 'NP' and copy != tree

	def test_listoperations(self):
		tree = Tree('(S (NP a))')
		tree.append(Tree('(VP c)'))
		tree.insert(1, Tree('(X b)'))
		assert tree.leaves() == ['a', 'b', 'c']
		assert tree.pop() == Tree('(VP c)')
		assert tree.pop(0).label == 'NP'
		assert str(tree) == '(S (X b))'
		tree.extend([Tree('(Y d)')])
		del tree[0]
		assert str(tree) == '(S (Y d))'

	def test_pprint(self):
		tree = Tree('(S (NP a) (VP b))')
		assert tree.pprint(margin=10) == '(S\n  (NP a)\n  (VP b))'
		assert unescape(escape('(a)')) == '(a)'
		assert str(Tree('S', ['('])) == '(S #LRB#)'

	def test_parseerrors(self):
		for treestr in ('(S (NP a)', '(S a) (T b)', 'S a', ''):
			with pytest.raises(ValueError):
				Tree(treestr)
		with pytest.raises(TypeError):
			Tree(5)


class Test_treetransforms(object):
	def test_roundtrip(self):
		for treestr in (
				'(ROOT (S (VP (VB run))))',
				'(ROOT (S (NP (NN dog)) (VP (VBZ barks))))',
				'(ROOT (S (NP (DT the) (JJ big) (JJ old) (NN dog)) '
					'(VP (VBZ barks) (ADVP (RB loudly)))))',
				'(ROOT (S (A a) (B b) (C c) (D d) (E e) (F f)))'):
			tree = Tree(treestr)
			annotated = annotate(tree)
			assert str(tree) == treestr
			assert all(len(node) <= 2 for node in annotated.subtrees())
			assert unannotate(annotated) == tree
			assert annotated.leaves() == tree.leaves()

	def test_annotate(self):
		tree = Tree('(S (NP (DT the) (JJ big) (JJ old) (NN dog)))')
		assert str(annotate(tree)) == (
				'(S (NP^S (DT^NP the) (@NP^S->_DT (JJ^NP big) '
				'(@NP^S->_DT_JJ (JJ^NP old) (@NP^S->_JJ_JJ (NN^NP dog))))))')

	def test_markovize(self):
		assert markovize('@NP^S->_', 'DT^NP') == '@NP^S->_DT'
		assert markovize('@NP^S->_DT', 'JJ') == '@NP^S->_DT_JJ'
		assert markovize('@NP^S->_DT_JJ', 'NN') == '@NP^S->_JJ_NN'
		with pytest.raises(ValueError):
			markovize('NP', 'DT')

	def test_splicenodes(self):
		tree = Tree('(@X (@Y (A a)) (B b))')
		assert str(splicenodes(tree, isintermediate)) == '(@X (A a) (B b))'

	def test_functiontags(self):
		tree = Tree('(ROOT (S (NP-SBJ^S (-NONE-^NP *)) (VP^S (VB go))))')
		assert str(unannotate(tree)) == (
				'(ROOT (S (NP (-NONE- *)) (VP (VB go))))')


class Test_treebank(object):
	def test_reader(self, tmp_path):
		filename = tmp_path / 'sample.mrg'
		filename.write_text(
				'( (S (NP-SBJ (NNP John))\n'
				'   (VP (VBZ runs))) )\n'
				'(S (NP (NNP Mary)) (VP (VBZ walks))) '
				'(S (NP (NNP Bob)) (VP (VBZ sits)))\n', encoding='utf8')
		corpus = BracketCorpusReader(str(filename), functions='remove')
		trees = corpus.trees()
		assert list(trees) == [1, 2, 3]
		assert str(trees[1]) == '(ROOT (S (NP (NNP John)) (VP (VBZ runs))))'
		assert str(trees[2]) == (
				'(ROOT (S (NP (NNP Mary)) (VP (VBZ walks))))')
		assert corpus.sents()[3] == ['Bob', 'sits']
		assert corpus.tagged_sents()[1] == [('John', 'NNP'), ('runs', 'VBZ')]
		assert corpus.blocks()[1].startswith('( (S')

		corpus = BracketCorpusReader(str(filename), ensureroot=None)
		assert str(corpus.trees()[2]) == (
				'(S (NP (NNP Mary)) (VP (VBZ walks)))')
		assert corpus.trees()[1][0][0].label == 'NP-SBJ'

	def test_segmentbrackets(self):
		assert list(segmentbrackets(['(A a) (B', 'b)'])) == [
				'(A a)', '(B\nb)']
		with pytest.raises(ValueError):
			list(segmentbrackets(['(S (NP a)']))
		with pytest.raises(ValueError):
			list(segmentbrackets(['(S a))']))
		with pytest.raises(ValueError):
			list(segmentbrackets(['foo (S a)']))

	def test_writetree(self):
		tree = Tree('(S (NP (NN a#LRB#)) (VP (VB b)))')
		assert writetree(tree) == '(S (NP (NN a#LRB#)) (VP (VB b)))\n'
		assert writetree(tree, 'tokens') == 'a#LRB# b\n'
		with pytest.raises(ValueError):
			writetree(tree, 'export')


class Test_grammar(object):
	def test_relativefrequencies(self):
		trees = [annotate(Tree(a)) for a in (
				'(ROOT (S (NP (DT the) (NN dog)) (VP (VBZ barks))))',
				'(ROOT (S (NP (NN cats)) (VP (VBP sleep) (ADVP (RB well)))))',
				'(ROOT (S (NP (DT a) (JJ big) (NN cat)) (VP (VBZ sleeps))))',
				'(ROOT (S (VP (VB go))))')]
		grammar = treebankgrammar(trees)
		totals = defaultdict(float)
		for rule in grammar.binary + grammar.unary:
			assert rule.score <= 0
			totals[rule.parent] += exp(rule.score)
		assert totals
		for parent, total in totals.items():
			assert abs(total - 1) < 1e-9, grammar.vocab.label(parent)
		vocab = grammar.vocab
		assert 'RB^ADVP' in vocab and 'NN^NP' in vocab
		rules, _ = writegrammar(grammar)
		assert 'ROOT\tS^ROOT\t0\n' in rules

	def test_errors(self):
		with pytest.raises(ValueError):
			treebankgrammar([Tree('(S (A a) (B b) (C c))')])
		with pytest.raises(ValueError):
			treebankgrammar([Tree('(S a (B b))')])
		with pytest.raises(ValueError):
			Grammar(Vocabulary(['S']), [BinaryRule(0, 1, 2, 0.0)], [])

	def test_lexicon(self):
		trees = [annotate(Tree(a)) for a in TRAIN.splitlines()]
		lexicon = SimpleLexicon(trees)
		assert lexicon.totaltokens == 6 and lexicon.totalwordtypes == 6
		assert lexicon.knownword('dog')
		assert not isinf(lexicon.score('dog', 'NN^NP'))
		assert lexicon.score('dog', 'NN^NP') > lexicon.score('dog', 'DT^NP')
		assert not isinf(lexicon.score('unicorn', 'NN^NP'))
		assert lexicon.score('dog', 'NN') == float('-inf')
		assert sorted(lexicon.tags()) == ['DT^NP', 'NN^NP', 'VBZ^VP']
		_, lex = writegrammar(treebankgrammar(trees), lexicon)
		assert 'dog\tNN^NP 1\n' in lex


class Test_unaryclosure(object):
	def test_bestpath(self):
		closure = UnaryClosure(3, [UnaryRule(0, 1, -5.0),
				UnaryRule(0, 2, -1.0), UnaryRule(2, 1, -1.0)])
		assert closure.score(0, 1) == -2.0
		assert closure.pathfor(0, 1) == (0, 2, 1)
		assert closure.pathfor(1, 0) is None
		assert closure.score(1, 0) == float('-inf')
		parents, scores = closure.arraysbychild(1)
		assert parents.tolist() == [0, 1, 2]
		assert scores.tolist() == [-2.0, 0.0, -1.0]

	def test_reflexive(self):
		closure = UnaryClosure(2, [UnaryRule(0, 0, -0.1), UnaryRule(1, 0, -1)])
		assert closure.score(0, 0) == 0.0
		assert closure.pathfor(0, 0) == (0, 0)
		assert closure.closedrulesbychild(0) == [(0, 0.0), (1, -1.0)]
		assert len(closure) == 3


class Test_pcfg(object):
	def test_endtoend(self):
		grammar, closure = makeparser(['ROOT', 'S', 'NP', 'VP'],
				[(1, 2, 3, -1.0)], [(0, 1, 0.0)])
		lexicon = DictLexicon({('dog', 'NP'): -0.5, ('barks', 'VP'): -0.3})
		chart, msg = pcfg.parse(['dog', 'barks'], grammar, lexicon, closure)
		assert chart
		assert chart.unary[0, 2, 0] == -1.8
		assert chart.score() == -1.8
		assert chart.score(1, 0, 2, False) == -1.8
		assert msg == 'log prob=-1.8'
		assert str(pcfg.bestparse(chart)) == '(ROOT (S (NP dog) (VP barks)))'

	def test_noparse(self):
		grammar, closure = makeparser(['ROOT', 'S', 'NP', 'VP'],
				[(1, 2, 3, -1.0)], [(0, 1, 0.0)])
		for score in (float('-inf'), float('nan')):
			lexicon = DictLexicon({}, score)
			chart, msg = pcfg.parse(['xyzzy', 'plugh'], grammar, lexicon,
					closure)
			assert not chart
			assert msg == 'no parse'
			for i in range(2):
				assert np.all(np.isneginf(chart.unary[i, i + 1]))
			assert chart.numitems() == 0
			assert pcfg.bestparse(chart) == Tree('ROOT', ['JUNK'])

	def test_unknownroot(self):
		grammar, closure = makeparser(['S', 'NP', 'VP'],
				[(0, 1, 2, -1.0)], [])
		lexicon = DictLexicon({('dog', 'NP'): -0.5, ('barks', 'VP'): -0.3})
		chart, _ = pcfg.parse(['dog', 'barks'], grammar, lexicon, closure)
		assert not chart
		assert chart.score(0) == -1.8
		assert pcfg.bestparse(chart) == Tree('ROOT', ['JUNK'])

	def test_reflexiveunary(self):
		grammar, closure = makeparser(['ROOT', 'X', 'A', 'B'],
				[(1, 2, 3, -1.0)], [(1, 1, -0.5), (0, 1, 0.0)])
		lexicon = DictLexicon({('a', 'A'): -0.5, ('b', 'B'): -0.5})
		chart, _ = pcfg.parse(['a', 'b'], grammar, lexicon, closure)
		assert chart.unarybp[0, 2, 1].child == 1
		assert chart.score() == -2.0
		assert str(pcfg.bestparse(chart)) == '(ROOT (X (A a) (B b)))'

	def test_unarychain(self):
		grammar, closure = makeparser(['ROOT', 'A', 'B', 'C'], [],
				[(1, 2, -1.0), (2, 3, -1.0), (0, 1, 0.0)])
		lexicon = DictLexicon({('w', 'C'): -0.5})
		chart, _ = pcfg.parse(['w'], grammar, lexicon, closure)
		tree = pcfg.reconstruct(chart, 1, 0, 1, True)
		assert str(tree) == '(A (B (C w)))'
		assert len(tree) == 1 and len(tree[0]) == 1
		assert ispreterminal(tree[0][0])
		assert chart.score() == -2.5
		assert str(pcfg.bestparse(chart)) == '(ROOT (A (B (C w))))'

	def test_unarychainoverbinary(self):
		grammar, closure = makeparser(['ROOT', 'A', 'B', 'S', 'X', 'Y'],
				[(3, 4, 5, -1.0)], [(0, 1, -0.5), (1, 2, -0.5), (2, 3, -1.0)])
		lexicon = DictLexicon({('x', 'X'): -0.5, ('y', 'Y'): -0.5})
		chart, _ = pcfg.parse(['x', 'y'], grammar, lexicon, closure)
		assert closure.pathfor(0, 3) == (0, 1, 2, 3)
		assert chart.unarybp[0, 2, 0].child == 3
		tree = pcfg.reconstruct(chart, 0, 0, 2, True)
		assert str(tree) == '(ROOT (A (B (S (X x) (Y y)))))'
		assert chart.score() == -0.5 + -0.5 + -1.0 + -1.0 + -0.5 + -0.5
		assert chart.score() == -4.0

	def test_inconsistentchart(self):
		def parsed():
			grammar, closure = makeparser(['ROOT', 'S', 'NP', 'VP'],
					[(1, 2, 3, -1.0)], [(0, 1, 0.0)])
			lexicon = DictLexicon({('dog', 'NP'): -0.5,
					('barks', 'VP'): -0.3})
			chart, _ = pcfg.parse(['dog', 'barks'], grammar, lexicon,
					closure)
			assert chart
			return chart

		chart = parsed()
		chart.binarybp[0, 2, 1] = None
		with pytest.raises(ValueError, match='no binary backpointer for S'):
			pcfg.bestparse(chart)
		chart = parsed()
		chart.unarybp[0, 2, 0] = None
		with pytest.raises(ValueError, match='no unary backpointer for ROOT'):
			pcfg.bestparse(chart)
		chart = parsed()
		chart.unarybp[0, 2, 0] = pcfg.UnaryBackpointer(2)
		with pytest.raises(ValueError, match='no unary path from ROOT to NP'):
			pcfg.bestparse(chart)
		chart = parsed()
		chart.unarybp[0, 1, 2] = pcfg.UnaryBackpointer(3)
		with pytest.raises(ValueError, match='no unary path from NP to VP'):
			pcfg.bestparse(chart)

	def test_tiebreak(self):
		grammar, closure = makeparser(['ROOT', 'S', 'A', 'B', 'C'],
				[(1, 2, 3, -1.0), (1, 2, 4, -1.0)], [(0, 1, 0.0)])
		lexicon = DictLexicon({('a', 'A'): -0.5, ('b', 'B'): -0.5,
				('b', 'C'): -0.5})
		chart, _ = pcfg.parse(['a', 'b'], grammar, lexicon, closure)
		assert chart.binarybp[0, 2, 1] == pcfg.BinaryBackpointer(1, 2, 3, 1)
		assert str(pcfg.bestparse(chart)) == '(ROOT (S (A a) (B b)))'

	def test_monotonic(self, monkeypatch):
		def checked(func):
			def wrapper(chart, *args):
				unary, binary = chart.unary.copy(), chart.binary.copy()
				func(chart, *args)
				assert np.all(chart.unary >= unary)
				assert np.all(chart.binary >= binary)
			return wrapper

		monkeypatch.setattr(pcfg, '_combine', checked(pcfg._combine))
		monkeypatch.setattr(pcfg, '_closecell', checked(pcfg._closecell))
		parser = trainparser()
		chart, _ = pcfg.parse('a dog barks'.split(), parser.grammar,
				parser.lexicon, parser.closure)
		assert chart

	def test_closuresubsumption(self):
		parser = trainparser()
		for sent in ('the dog barks', 'a cat barks', 'dog the'):
			chart, _ = pcfg.parse(sent.split(), parser.grammar,
					parser.lexicon, parser.closure)
			finite = np.isfinite(chart.binary)
			assert np.all(chart.unary[finite] >= chart.binary[finite])


class Test_parser(object):
	def test_reproduce(self):
		parser = trainparser()
		result = parser.parse('the dog barks'.split())
		assert not result.noparse
		assert result.parsetree == Tree(TRAIN.splitlines()[0])
		assert 0 < result.prob <= 1
		assert result.logprob < 0 and exp(result.logprob) == result.prob
		result = parser.parse('a unicorn barks'.split())
		assert not result.noparse
		assert str(result.parsetree) == (
				'(ROOT (S (NP (DT a) (NN unicorn)) (VP (VBZ barks))))')

	def test_noparse(self):
		parser = trainparser()
		for sent in ([], ['dog']):
			result = parser.parse(sent)
			assert result.noparse
			assert result.prob == 0.0
			assert result.logprob == float('-inf')
			assert result.parsetree == Tree('ROOT', ['JUNK'])

	def test_maxlen(self):
		parser = trainparser(TRAIN + '(ROOT (S (VP (VB go) (NP (PRP it)) '
				'(ADVP (RB now) (RB please)))))\n', maxlen=3)
		assert 'VB^VP' not in parser.grammar.vocab
		assert 'DT^NP' in parser.grammar.vocab

	def test_doparsing(self):
		parser = trainparser()
		sents = [a.split() for a in ('the dog barks', 'a cat sleeps',
				'dog', 'the cat barks')]
		out1, out2 = io.StringIO(), io.StringIO()
		assert doparsing(parser, sents, out1) == 1
		assert doparsing(parser, sents, out2, numproc=2) == 1
		assert out1.getvalue() == out2.getvalue()
		lines = out1.getvalue().splitlines()
		assert lines[0] == TRAIN.splitlines()[0]
		assert lines[2] == '(ROOT JUNK)'

	def test_readparams(self):
		prm = readparams({'--numproc': '4', '--functions': 'leave'})
		assert prm.numproc == 4 and prm.functions is None
		assert prm.root == 'ROOT'
		with pytest.raises(ValueError):
			readparams({'--numproc': '0'})
		with pytest.raises(ValueError):
			readparams({'--fmt': 'export'})


class Test_eval(object):
	gold = Tree('(ROOT (S (NP (DT the) (NN dog)) (VP (VBZ barks))))')
	cand = Tree('(ROOT (S (DT the) (VP (NN dog) (VBZ barks))))')

	def test_bracketings(self):
		assert bracketings(self.gold) == {('S', (0, 3)): 1,
				('NP', (0, 2)): 1, ('VP', (2, 3)): 1}
		assert ('ROOT', (0, 3)) in bracketings(self.gold, ())

	def test_scores(self):
		gbrack, cbrack = bracketings(self.gold), bracketings(self.cand)
		assert f_measure(gbrack, gbrack) == 1
		assert precision(gbrack, cbrack) == 0.5
		assert recall(gbrack, cbrack) == Decimal(1) / 3
		assert f_measure(gbrack, cbrack) < 1
		assert isnan(precision(gbrack, bracketings(Tree('(ROOT JUNK)'))))

	def test_evaluator(self):
		evaluator = Evaluator()
		evaluator.add(1, self.gold, self.gold.copy(True))
		assert evaluator.acc.scores()['lf'] == '100.00'
		evaluator.add(2, self.gold, self.cand)
		evaluator.add(3, self.gold, Tree('ROOT', ['JUNK']))
		scores = evaluator.acc.scores()
		assert float(scores['lf']) < 100
		assert float(scores['lp']) == 80
		assert evaluator.acc.noparse == 1
		summary = summarylines(evaluator.summary())
		assert summary['no parses'] == '1'
		assert summary['number of sentences'] == '3'
		assert summary['gold brackets'] == '9'
		assert summary['cand. brackets'] == '5'
		with pytest.raises(ValueError):
			evaluator.add(4, self.gold, Tree('(ROOT (S (X a) (Y b)))'))


def summarylines(summary):
	return dict((key, value.strip()) for key, value
			in (line.split(':', 1) for line in summary.splitlines()
				if ':' in line))


def runcli(monkeypatch, *args):
	argv = ['markovpcfg'] + [str(a) for a in args]
	monkeypatch.setattr(sys, 'argv', argv)
	monkeypatch.setattr(cli, 'argv', argv)
	cli.main()


class Test_cli(object):
	def test_parser(self, tmp_path, monkeypatch):
		treebankfile = tmp_path / 'train.mrg'
		treebankfile.write_text(TRAIN, encoding='utf8')
		inputfile = tmp_path / 'input.txt'
		inputfile.write_text('the dog barks\n\ndog\n', encoding='utf8')
		outputfile = tmp_path / 'output.txt'
		runcli(monkeypatch, 'parser', '--verbosity=0', treebankfile,
				inputfile, outputfile)
		assert outputfile.read_text(encoding='utf8') == (
				TRAIN.splitlines()[0] + '\n(ROOT JUNK)\n')

	def test_usage(self, monkeypatch):
		with pytest.raises(SystemExit) as err:
			runcli(monkeypatch, 'parser', '--numproc=x', 'train.mrg')
		assert err.value.code == 2
		with pytest.raises(SystemExit) as err:
			runcli(monkeypatch, 'nonsense')
		assert err.value.code == 2
		with pytest.raises(SystemExit) as err:
			runcli(monkeypatch, 'treetransforms', '--annotate', '--unannotate')
		assert err.value.code == 2

	def test_version(self, monkeypatch, capsys):
		from markovpcfg import __version__
		runcli(monkeypatch, '--version')
		assert capsys.readouterr().out.strip() == __version__

	def test_grammar(self, tmp_path, monkeypatch):
		treebankfile = tmp_path / 'train.mrg'
		treebankfile.write_text(TRAIN, encoding='utf8')
		runcli(monkeypatch, 'grammar', treebankfile, tmp_path / 'pcfg')
		rules = (tmp_path / 'pcfg.rules').read_text(encoding='utf8')
		lex = (tmp_path / 'pcfg.lex').read_text(encoding='utf8')
		assert 'ROOT\tS^ROOT\t0\n' in rules
		assert 'S^ROOT\tNP^S\t@S^ROOT->_NP\t0\n' in rules
		assert 'barks\tVBZ^VP 1\n' in lex

	def test_treetransforms(self, tmp_path, monkeypatch):
		treebankfile = tmp_path / 'train.mrg'
		treebankfile.write_text(TRAIN, encoding='utf8')
		annotated = tmp_path / 'annotated.mrg'
		restored = tmp_path / 'restored.mrg'
		runcli(monkeypatch, 'treetransforms', '--annotate', treebankfile,
				annotated)
		assert annotated.read_text(encoding='utf8').splitlines()[0] == (
				'(ROOT (S^ROOT (NP^S (DT^NP the) (@NP^S->_DT (NN^NP dog))) '
				'(@S^ROOT->_NP (VP^S (VBZ^VP barks)))))')
		runcli(monkeypatch, 'treetransforms', '--unannotate', annotated,
				restored)
		assert restored.read_text(encoding='utf8') == TRAIN

	def test_eval(self, tmp_path, monkeypatch, capsys):
		goldfile = tmp_path / 'gold.mrg'
		goldfile.write_text(TRAIN, encoding='utf8')
		runcli(monkeypatch, 'eval', goldfile, goldfile)
		summary = summarylines(capsys.readouterr().out)
		assert summary['labeled f-measure'] == '100.00'
		assert summary['exact match'] == '100.00'
		assert summary['pos accuracy'] == '100.00'
		assert summary['no parses'] == '0'
