"""
Turn one line of text into tokens, and tokens into statements.

The scanner runs to completion before the parser starts, because the parser
wants to look one token past the current one to tell an assignment from an
expression. The parser, by contrast, hands out one statement at a time so the
caller can execute each before the next one is even parsed.
"""
import string
from typing import Iterator, Optional, TextIO

from .ontology import (
	Token, Nom, PUNCTUATION, KINDS,
	PLUS, MINUS, MULTIPLY, DIVIDE, EQUALS, AND, OR, NOT, LPAREN, RPAREN,
	NUMBER, STRING, BOOLEAN, IDENTIFIER,
)
from .errors import UnexpectedCharacter, UnterminatedString, UnexpectedToken
from .primitive import decimal
from . import syntax

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters + "_")
_WORD = _LETTERS | _DIGITS

KEYWORD_LOG = "log"
_BOOLEANS = {"true": True, "false": False}

class Scanner:
	""" Single-character lookahead; None stands for the end of the line. """

	def __init__(self, text:str, trace:Optional[TextIO]=None):
		self._text = text
		self._trace = trace
		self.tokens:list[Token] = []
		self.pos = -1
		self.current:Optional[str] = None
		self.advance()

	def advance(self):
		self.pos += 1
		self.current = self._text[self.pos] if self.pos < len(self._text) else None
		if self._trace is not None:
			print("Lexer advance: pos=%d, curr_char=%s" % (self.pos, self.current or ""), file=self._trace)

	def scan(self) -> list[Token]:
		while self.current is not None:
			char = self.current
			if char in PUNCTUATION:
				self._emit(PUNCTUATION[char], None, self.pos, self.pos+1)
				self.advance()
			elif char == '"': self._scan_string()
			elif char.isspace(): self.advance()
			elif char in _DIGITS: self._scan_number()
			elif char in _LETTERS: self._scan_word()
			else: raise UnexpectedCharacter(char, self.pos)
		if self._trace is not None:
			print("Lexer tokens: [%s]" % ", ".join(map(str, self.tokens)), file=self._trace)
		return self.tokens

	def _emit(self, kind:str, value, start:int, stop:Optional[int]=None):
		assert kind in KINDS, kind
		self.tokens.append(Token(kind, value, slice(start, self.pos if stop is None else stop)))

	def _take_while(self, allowed) -> str:
		start = self.pos
		while self.current is not None and self.current in allowed:
			self.advance()
		return self._text[start:self.pos]

	def _scan_number(self):
		start = self.pos
		self._emit(NUMBER, decimal(self._take_while(_DIGITS)), start)

	def _scan_word(self):
		start = self.pos
		word = self._take_while(_WORD)
		if word in _BOOLEANS: self._emit(BOOLEAN, _BOOLEANS[word], start)
		else: self._emit(IDENTIFIER, word, start)

	def _scan_string(self):
		start = self.pos
		self.advance()  # Opening quote
		body = []
		while self.current is not None and self.current != '"':
			body.append(self.current)
			self.advance()
		if self.current is None:
			raise UnterminatedString(start, self.pos)
		self.advance()  # Closing quote
		self._emit(STRING, "".join(body), start)


def tokenize(line:str, trace:Optional[TextIO]=None) -> list[Token]:
	return Scanner(line, trace).scan()


_SUMS = frozenset([PLUS, MINUS, AND, OR])
_PRODUCTS = frozenset([MULTIPLY, DIVIDE])

class Parser:
	"""
	Recursive descent over a materialized token list.
	The only state is the current index, which only ever moves forward.

		statement   := assignment | printStmt | expr
		assignment  := IDENTIFIER EQUALS expr
		printStmt   := IDENTIFIER("log") expr
		expr        := term ( (PLUS|MINUS|AND|OR) term )*
		term        := factor ( (MULTIPLY|DIVIDE) factor )*
		factor      := NUMBER | STRING | BOOLEAN | IDENTIFIER
		             | NOT factor | LPAREN expr RPAREN

	Boolean and additive operators share one precedence tier.
	"""

	def __init__(self, tokens:list[Token], trace:Optional[TextIO]=None):
		self._tokens = tokens
		self._trace = trace
		self._end = tokens[-1].span.stop if tokens else 0
		self.idx = -1
		self.current:Optional[Token] = None
		self.advance()

	def advance(self):
		self.idx += 1
		self.current = self._tokens[self.idx] if self.idx < len(self._tokens) else None
		if self._trace is not None:
			shown = "<END>" if self.current is None else str(self.current)
			print("Parser advance: idx=%d, curr_tok=%s" % (self.idx, shown), file=self._trace)

	def _next_kind(self) -> Optional[str]:
		following = self.idx + 1
		if following < len(self._tokens): return self._tokens[following].kind

	def _accept(self, kinds) -> Optional[Token]:
		token = self.current
		if token is not None and token.kind in kinds:
			self.advance()
			return token

	def _expect(self, kind:str, description:str) -> Token:
		token = self._accept((kind,))
		if token is None: raise UnexpectedToken(description, self.current, self._end)
		return token

	def statements(self) -> Iterator[syntax.Statement]:
		while self.current is not None:
			yield self.statement()

	def statement(self) -> syntax.Statement:
		token = self.current
		if token.kind == IDENTIFIER:
			if self._next_kind() == EQUALS:
				return self.assignment()
			if token.value == KEYWORD_LOG:
				self.advance()
				return syntax.LogStatement(Nom(token), self.expr())
		return syntax.ExprStatement(self.expr())

	def assignment(self) -> syntax.Assignment:
		target = Nom(self._expect(IDENTIFIER, "a variable name"))
		self._expect(EQUALS, "'='")
		return syntax.Assignment(target, self.expr())

	def expr(self) -> syntax.ValueExpression:
		result = self.term()
		while True:
			op = self._accept(_SUMS)
			if op is None: return result
			result = syntax.BinExp(result, op, self.term())

	def term(self) -> syntax.ValueExpression:
		result = self.factor()
		while True:
			op = self._accept(_PRODUCTS)
			if op is None: return result
			result = syntax.BinExp(result, op, self.factor())

	def factor(self) -> syntax.ValueExpression:
		token = self._accept((NUMBER, STRING, BOOLEAN))
		if token is not None: return syntax.Literal(token)
		token = self._accept((IDENTIFIER,))
		if token is not None: return syntax.Lookup(Nom(token))
		token = self._accept((NOT,))
		if token is not None: return syntax.Negation(token, self.factor())
		token = self._accept((LPAREN,))
		if token is not None:
			inner = self.expr()
			return syntax.Parenthesized(token, inner, self._expect(RPAREN, "')'"))
		raise UnexpectedToken("a number, string, boolean, name, '!' or '('", self.current, self._end)


def parse_text(line:str) -> list[syntax.Statement]:
	""" Parse a whole line at once; mainly for poking at the tree. """
	return list(Parser(tokenize(line)).statements())
