from setuptools import setup


setup(name='gridfield',
      version='0.1.0',
      description='Grid fields with finite-difference operators for PDE simulations',
      author='gridfield developers',
      license='MIT',
      packages=['gridfield', 'gridfield.operators', 'gridfield.visualization'],
      install_requires=[
          'scipy',
          'numpy',
          'matplotlib',
           ],
      extras_require={
          'tests': ['pytest'],
      },
      python_requires='>=3.9',
      long_description='None',
      long_description_content_type='text/markdown',
      keywords='finite differences, grids, fluid simulation',
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Science/Research',
          'Intended Audience :: Developers',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3.9',
      ],
      zip_safe=False)
