from setuptools import setup

description = 'Compute the positions of the Sun and the Moon and their rise, transit and set times.'
long_description = '''Positions of the Sun and the Moon for an observer on the Earth, following the algorithms of
Jean Meeus' Astronomical Algorithms. The package covers Julian days and delta T, nutation and sidereal time, coordinate
transformations, parallax and refraction, the low accuracy solar theory, the lunar series of chapter 47, rise, transit
and set times with twilight, and the illuminated fraction of the Moon.'''

setup(
    name='skytrack',
    version='0.1.0',
    author="Quinton Barnes",
    author_email="devqbizzle68@gmail.com",
    description=description,
    long_description=long_description,
    long_description_content_type='text/plain',
    license='MIT',
    python_requires='>=3.10',
    install_requires=['pyevspace>=0.0.12.4,<0.1'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy'
    ],
    packages=['skytrack', 'skytrack.util', 'skytrack.core', 'skytrack.bodies'],
    package_dir={'': 'src'},
)
