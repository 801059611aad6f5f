
from setuptools import setup
from setuptools import find_packages

setup(
	name='GraphVisit',
	version = '0.1',
	description = 'Breadth-first, depth-first and Dijkstra visits driven by visitors',

	entry_points={
		'console_scripts':[
			'graphvisit = graphvisit.scripts.visit:main',
		],
	},

	python_requires='>=3.7',
	install_requires=[
		'networkx',
		'numpy',
		'scipy',
		'toml',
	],
	extras_require={
		'test': ['pytest'],
	},

	packages=find_packages(), # include sub-packages
)
