from setuptools import setup, find_packages

setup(name='vocabdeck',
      version='0.1.0',
      description='vocabulary flashcards with study and quiz modes',
      author='gront',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=[
          'pandas',
          'openpyxl',
          'odfpy',
      ],
      extras_require={
          'test': ['pytest'],
      },
     )
