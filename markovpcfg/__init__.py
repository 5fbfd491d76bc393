"""Markovized PCFG parsing (markov-pcfg).

Main components:

- Annotation of treebank trees with parent and sibling context
  (vertical and horizontal Markovization of order 2) and binarization.
- A treebank PCFG and a smoothed word-tag lexicon read off annotated trees.
- A CKY parser with a dense chart that alternates binary combination with a
  precomputed unary closure, producing the Viterbi parse.
"""
__version__ = '0.1.0'
