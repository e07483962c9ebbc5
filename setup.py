from setuptools import setup, find_packages
from setuptools.command.install import install
from pathlib import Path
import shutil

class PostInstallCommand(install):
    """Post-installation for installation mode."""
    def run(self):
        install.run(self)

        config_dir = Path.home() / '.config' / 'addrcheck'
        config_file = config_dir / 'config.conf'
        template_file = Path(__file__).parent / 'config.conf.template'

        config_dir.mkdir(parents=True, exist_ok=True)

        # Never overwrite an existing configuration
        if not config_file.exists() and template_file.exists():
            print(f"Installing default config to {config_file}")
            shutil.copy(template_file, config_file)
        elif config_file.exists():
            print(f"Config file already exists at {config_file}")
        else:
            print(f"Warning: Template file not found at {template_file}")


setup(
    name="addrcheck",
    version="1.0.0",
    description="IPv4/IPv6 address literal validation for command-line arguments",
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'addrcheck=address_validator.main:main',
        ],
    },
    cmdclass={
        'install': PostInstallCommand,
    },
    package_data={
        '': ['config.conf.template'],
    },
    include_package_data=True,
    license='GPLv3',
)
