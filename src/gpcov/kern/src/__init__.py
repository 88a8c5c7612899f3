"""

Implementations of the covariance functions. :py:class:`gpcov.kern.src.kern.CovarianceFunction` is the base class of all of them.

.. inheritance-diagram:: gpcov.kern.src.kern.CovarianceFunction

"""
