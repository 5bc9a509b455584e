"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='smartcalc',
	version='0.1.0',
	packages=['smartcalc', ],
	entry_points={
		'console_scripts': ["smartcalc = smartcalc.cmdline:main"],
	},
	license='MIT',
	description='An interactive calculator for arbitrarily large integers, with variables',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
