import os
import re
import setuptools


def find_version(filename):
    with open(filename) as f:
        text = f.read()
    match = re.search(r"^ecshare_version_str = '(.*)'$", text, re.MULTILINE)
    if not match:
        raise RuntimeError('cannot find version')
    return match.group(1)


tld = os.path.abspath(os.path.dirname(__file__))
version = find_version(os.path.join(tld, 'ecshare', '__init__.py'))


setuptools.setup(
    name='py-ecshare',
    version=version,
    scripts=[],
    python_requires='>=3.8',
    install_requires=['phe', 'coincurve'],
    extras_require={'test': ['pytest', 'ecdsa']},
    packages=['ecshare'],
    description='Two-party elliptic curve secret sharing with Paillier encryption',
    author='Neil Booth',
    author_email='kyuupichan@pm.me',
    license='MIT Licence',
    url='https://github.com/kyuupichan/ecshare',
    long_description='Master side of a two-party elliptic curve secret sharing protocol',
    download_url=('https://github.com/kyuupichan/ecshare/archive/'
                  f'{version}.tar.gz'),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Framework :: AsyncIO',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        "Programming Language :: Python :: 3.8",
        "Topic :: Security :: Cryptography",
    ],
)
