from setuptools import setup, find_packages

from kdbxcommander import __version__

install_requires = [
    'asciitree',
    'colorama',
    'prompt_toolkit',
    'tabulate',
]

if __name__ == '__main__':
    setup(
        name='kdbxcommander',
        version=__version__,
        description='Interactive command shell for KeePass vaults driven by keepassxc-cli',
        long_description='KDBX Commander browses a KeePass vault (.kdbx, .kdb) group by group and prints entry '
                         'fields. Every query is delegated to keepassxc-cli; the master password is passed on '
                         'standard input.',
        python_requires='>=3.7',
        packages=find_packages(include=['kdbxcommander', 'kdbxcommander.*']),
        install_requires=install_requires,
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'kdbx=kdbxcommander.__main__:main',
            ],
        },
        classifiers=[
            'Environment :: Console',
            'Programming Language :: Python :: 3',
            'Topic :: Security',
        ],
    )
