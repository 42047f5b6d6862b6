"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='funtools',
	version='0.1.0',
	packages=['funtools'],
	entry_points={
		'console_scripts': ["funtools = funtools.cmdline:main"],
	},
	license='MIT',
	description='An uninhabited type, a unit conversion, and fixed-point combinators for anonymous recursion',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Environment :: Console",
	],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
