from anima.engine.gameformat.parser import (
    ActorOnImpassableTileError,
    EmptyActorDefinitionError,
    InvalidActorColorError,
    InvalidActorXError,
    InvalidActorYError,
    MissingActorXError,
    MissingActorYError,
    NoLineBreakAfterRowsError,
    NoRowsError,
    OverlappingActorsError,
    ParseError,
    TooManyActorsError,
    UnevenRowsError,
    UnexpectedCharacterError,
    parse,
)
from anima.engine.gameformat.render import dump, render

__all__ = [
    "ActorOnImpassableTileError",
    "EmptyActorDefinitionError",
    "InvalidActorColorError",
    "InvalidActorXError",
    "InvalidActorYError",
    "MissingActorXError",
    "MissingActorYError",
    "NoLineBreakAfterRowsError",
    "NoRowsError",
    "OverlappingActorsError",
    "ParseError",
    "TooManyActorsError",
    "UnevenRowsError",
    "UnexpectedCharacterError",
    "dump",
    "parse",
    "render",
]
