import setuptools

setuptools.setup(
  name='ebshrink',
  description='Empirical Bayes shrinkage of log2 effect sizes on a grid',
  version='0.1',
  license='MIT',
  install_requires=[
    'numpy',
    'pandas',
    'scipy',
  ],
  extras_require={
    'test': ['pytest'],
  },
  packages=setuptools.find_packages('src'),
  package_dir={'': 'src'},
)
