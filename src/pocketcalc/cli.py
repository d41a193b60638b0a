import logging
from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import CalculatorError
from .machine import Machine
from .keys import Classifier


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=None,
                                    # TODO: Show memory and the pending
                                    # operation here.
                                    bottom_toolbar=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.

    Every line of input is a run of keys; after each line, the display is
    printed.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(name)s: %(message)s'

    def dumper(self):
        '''
        Dump every key, its category, and the display right after it.
        '''
        machine = Machine()
        classifier = Classifier()
        print('<key>\t<category>\t<display>')
        for line in self.args.expressions:
            for key in classifier.lex(line):
                try:
                    category = classifier.classify(key).value
                except CalculatorError:
                    category = 'invalid'
                machine.press(key)
                print(repr(key), category, machine.read_display(), sep='\t')

    def executor(self):
        '''
        Run the calculator.
        '''
        machine = Machine()
        classifier = Classifier()
        for line in self.args.expressions:
            for key in classifier.lex(line):
                machine.press(key)
            print(machine.read_display(), flush=True)

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty

        Plain stdin otherwise.
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Pocket calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every key to stderr')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='lines of keys to press')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' own.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(format=self.LOG_FORMAT,
                            level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
