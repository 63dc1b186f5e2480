"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='xinter-lang',
	version='0.1.0',
	packages=['xinter'],
	entry_points={
		'console_scripts': ["xinter = xinter.cmdline:main"],
	},
	license='MIT',
	description='An interactive evaluator for a tiny language of integers, booleans, strings and variables',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
