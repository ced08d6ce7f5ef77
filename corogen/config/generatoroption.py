from corogen.config.config import (OptionDescription, BoolOption, StrOption,
                                   Config, is_identifier)


corogen_optiondescription = OptionDescription("corogen", "corogen options", [
    OptionDescription("exports", "Names the public operations are bound to", [
        StrOption("generator_alias",
                  "name to bind the generator constructor to",
                  default="generator", validator=is_identifier,
                  cmdline="--generator-alias"),
        StrOption("yield_alias",
                  "name to bind the yield operation to",
                  default="yield_", validator=is_identifier,
                  cmdline="--yield-alias"),
    ]),
    OptionDescription("generator", "Generator behaviour", [
        BoolOption("restart",
                   "restart the body when it returns instead of finishing "
                   "the generator",
                   default=False, cmdline="--restart"),
        BoolOption("trace",
                   "log every context transfer and state change",
                   default=False, cmdline="--trace"),
    ]),
])


def get_corogen_config(overrides=None):
    if overrides is None:
        overrides = {}
    return Config(corogen_optiondescription, **overrides)
