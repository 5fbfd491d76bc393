"""Generic setup.py for a pure Python package."""
import sys
from setuptools import setup

from markovpcfg import __version__

with open('README.rst') as inp:
	README = inp.read()

REQUIRES = [
		'numpy',  # '>=1.17'
		]
METADATA = dict(name='markov-pcfg',
		version=__version__,
		description='CKY parsing with Markovized probabilistic '
			'context-free grammars',
		long_description=README,
		classifiers=[
				'Development Status :: 4 - Beta',
				'Environment :: Console',
				'Intended Audience :: Science/Research',
				'Operating System :: POSIX',
				'Programming Language :: Python :: 3',
				'Topic :: Text Processing :: Linguistic',
		],
		python_requires='>=3.6',
		install_requires=REQUIRES,
		extras_require={'test': ['pytest']},
		packages=['markovpcfg'],
		entry_points={
				'console_scripts': ['markovpcfg = markovpcfg.cli:main']},
	)

if __name__ == '__main__':
	if sys.version_info[:2] < (3, 6):
		raise RuntimeError('Python version 3.6+ required.')
	setup(**METADATA)
