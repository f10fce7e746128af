# src/crunz_config/core/config/crunz_schema.py
"""
Definição canônica das opções reconhecidas em `crunz.yml`.

A raiz é estrita: chaves desconhecidas são rejeitadas. Todas as opções
possuem default, logo um arquivo ausente ou vazio sempre produz uma
configuração válida.
"""

from __future__ import annotations

from .definition import (
    BooleanNode,
    EnumNode,
    IntegerNode,
    ListNode,
    MappingNode,
    ScalarNode,
)

ROOT_NAME = "crunz"

MAILER_TRANSPORTS = ("smtp", "mail", "sendmail")


class CrunzConfigurationDefinition:
    """Schema das opções do scheduler."""

    def get_config_tree(self) -> MappingNode:
        return MappingNode(
            name=ROOT_NAME,
            children=(
                ScalarNode(
                    name="source",
                    default="tasks",
                    allow_null=False,
                    info="Directory holding the task files.",
                ),
                ScalarNode(
                    name="suffix",
                    default="Tasks.php",
                    allow_null=False,
                    info="File suffix used to detect task files.",
                ),
                ScalarNode(
                    name="timezone",
                    default=None,
                    info="Timezone used to evaluate task schedules.",
                ),
                BooleanNode(name="timezone_log", default=False),
                ScalarNode(name="errors_log", default=False),
                ScalarNode(name="output_log", default=False),
                BooleanNode(name="log_output", default=False),
                BooleanNode(name="log_errors", default=False),
                BooleanNode(name="log_ignore_empty_context", default=False),
                BooleanNode(name="log_allow_line_breaks", default=False),
                BooleanNode(name="email_output", default=False),
                BooleanNode(name="email_errors", default=False),
                MappingNode(
                    name="mailer",
                    children=(
                        EnumNode(
                            name="transport",
                            values=MAILER_TRANSPORTS,
                            default="smtp",
                        ),
                        ListNode(
                            name="recipients",
                            prototype=ScalarNode(name="recipient", allow_null=False),
                        ),
                        ScalarNode(name="sender_name", default=None),
                        ScalarNode(name="sender_email", default=None),
                    ),
                ),
                MappingNode(
                    name="smtp",
                    children=(
                        ScalarNode(name="host", default=None),
                        IntegerNode(
                            name="port",
                            default=None,
                            allow_null=True,
                            min=1,
                            max=65535,
                        ),
                        ScalarNode(name="username", default=None),
                        ScalarNode(name="password", default=None),
                        ScalarNode(name="encryption", default=None),
                    ),
                ),
            ),
        )
