from setuptools import setup

setup(name='dnst',
      version='0.1.0',
      scripts=['dnst', 'ldns-nsec3-hash'],
      description='Multicall tool for DNS related functions',
      url='https://github.com/NLnetLabs/dnst',
      packages=['dnstlib', 'dnstlib.commands'],
      python_requires='>=3.7',
      install_requires=[],
      extras_require={'test': ['pytest']},
      long_description = \
      """dnst - DNS tools in Python, with an ldns compatible mode.""",
      )
