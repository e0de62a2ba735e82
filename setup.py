import setuptools

setuptools.setup(
	name='abnf-tools',
	version='0.1.0.0',
	packages=[
		'abnftools',
		'abnftools.grammar',
		'abnftools.parsing',
		'abnftools.scanning',
		'abnftools.support',
	],
	description='Compile ABNF (RFC 5234) grammars and validate text against them, with helpful diagnostics',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
