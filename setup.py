from glob import glob
from setuptools import setup


setup(
    name='pocketcalc',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Pocket calculator engine',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['pocketcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
