from setuptools import find_packages, setup

package_name = 'pickup_planner'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
    python_requires='>=3.8',
    install_requires=['numpy'],
    zip_safe=True,
    maintainer='User',
    maintainer_email='user@example.com',
    description='Cube pickup sequencing and obstacle-aware waypoint planning for a UR3e arm',
    license='MIT',
    extras_require={
        'test': [
            'pytest',
        ],
        'sim': [
            'pybullet',
        ],
    },
    entry_points={
        'console_scripts': [
            'pickup-plan = pickup_planner.cli:main',
        ],
    },
)
