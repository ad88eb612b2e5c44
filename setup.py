import setuptools

setuptools.setup(
	name='setcalc',
	version='0.1.0',
	packages=[
		'setcalc',
		'setcalc.evaluation',
		'setcalc.scanning',
		'setcalc.support',
	],
	python_requires='>=3.9',
	description='Evaluate one-line set-algebra expressions over literal integer sets',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
    ],
)
