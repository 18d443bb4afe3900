from setuptools import setup

package_name = 'flat_trajectories'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    package_dir={package_name: 'src'},
    install_requires=['setuptools', 'numpy', 'matplotlib', 'tyro'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',
    zip_safe=True,
    maintainer='root',
    maintainer_email='franche1984@gmail.com',
    description='Differentially flat point-to-point trajectory generation',
    license='MIT',
    entry_points={
        'console_scripts': [
            'flat_trajectory = flat_trajectories.generator_cli:entry_point',
        ],
    },
)
