#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
    Utilities for handling solvers

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverLookup
"""
from .backtrack import NQ_backtrack
from .ortools import NQ_ortools


class SolverLookup():
    @classmethod
    def base_solvers(cls):
        """
            Return ordered list of (name, class) of base solvers

            First one is default
        """
        return [("backtrack", NQ_backtrack),
                ("ortools", NQ_ortools),
               ]

    @classmethod
    def print_status(cls):
        """
            Print all solvers and their installation status on this system.
        """
        for (basename, NQ_slv) in cls.base_solvers():
            if NQ_slv.supported():
                print(f"{basename}: Supported, ready to use.")
            else:
                print(f"{basename}: Not supported (missing Python package).")

    @classmethod
    def supported(cls):
        """
            Return the list of names of all solvers supported on this system.
        """
        return [basename for (basename, NQ_slv) in cls.base_solvers() if NQ_slv.supported()]

    @classmethod
    def get(cls, name=None, n=0, **init_kwargs):
        """
            get a specific solver (by name), with board size 'n' passed to its constructor

            This is the preferred way to initialise a solver from its name

            :param name: name of the solver to use
            :param n: size of the board
            :param init_kwargs: additional keyword arguments to pass to the solver constructor
        """
        solver_cls = cls.lookup(name=name)
        return solver_cls(n, **init_kwargs)

    @classmethod
    def lookup(cls, name=None):
        """
            lookup a solver _class_ by its name

            warning: returns a 'class', not an object!
            see get() for normal uses
        """
        if name is None:
            # first solver class
            return cls.base_solvers()[0][1]

        for (basename, NQ_slv) in cls.base_solvers():
            if basename == name:
                return NQ_slv
        raise ValueError(f"Unknown solver '{name}', choose from {[b for (b, _) in cls.base_solvers()]}")

    @classmethod
    def version(cls):
        """
        Returns an overview of all solvers as a list of dicts.

        Each dict consists of:

        - "name": <base_solver>
        - "installed": install status (True/False)
        - "version": version of solver's Python library (None for pure Python solvers)
        """
        result = []
        for (basename, NQ_slv) in cls.base_solvers():
            installed = NQ_slv.supported()
            result.append({
                "name": basename,
                "installed": installed,
                "version": NQ_slv.version() if installed else None,
            })
        return result

    @classmethod
    def print_version(cls):
        """
        Prints a tabulated report on the different solvers,
        i.e. whether they are installed on the current system and if so which version.
        """
        print(f"{'Solver':<25} {'Installed':<10} {'Version':<15}")
        print("-" * 50)
        for solver_version in cls.version():
            basename, installed, version = solver_version["name"], solver_version["installed"], solver_version["version"]
            print(f"{basename:<25} {'Yes' if installed else 'No':<10} {(version if version else ' '):<15}")
