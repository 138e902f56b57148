from setuptools import setup
from Cython.Build import cythonize  # type: ignore

setup(
    name = 'seqalgos',
    version = '0.1.0',
    description = 'Bounded top-k selection and sorted merging with set semantics',
    python_requires = '>=3.10',
    py_modules = [
        'util',
        'topk',
        'merge',
        'mergesorted',
        'unique',
        'cycle',
        'delta',
        ],
    install_requires = [
        'tqdm',
        ],
    extras_require = {
        'test': ['pytest'],
        },
    ext_modules = cythonize([
        "fast_merge.pyx",
        ]),  # type: ignore
)
