import functools
import inspect
import warnings


class ArgumentCountError(TypeError):
    """ Raised when one of the equation of state functions is given the wrong number of arguments. """
    pass


def fixed_arguments(function):
    """
    Decorate a function so that it only accepts exactly the arguments in its signature. Calling it with more or
    fewer raises an ArgumentCountError before any of the wrapped code runs.

    Parameters
    ----------
    function : callable
        The function to wrap. It must not have optional arguments.

    Returns
    -------
    wrapper : callable
        The wrapped function.

    """

    signature = inspect.signature(function)
    nargs = len(signature.parameters)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            signature.bind(*args, **kwargs)
        except TypeError:
            raise ArgumentCountError('{}: Must pass {} parameters'.format(function.__name__, nargs)) from None
        return function(*args, **kwargs)

    return wrapper


def _warn(*args, **kwargs):
    """ Custom warning function which doesn't print the code to screen. """
    # Mainly taken inspiration from https://stackoverflow.com/questions/2187269.
    msg = warnings.WarningMessage(*args, **kwargs)
    print(f'{msg.message} ({msg.filename}:{msg.lineno})')


# Update the warnings module with the custom warning function and then make warn an object in this module.
warnings.showwarning = _warn
warn = warnings.warn
