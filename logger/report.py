REPORT_TEMPLATE = (
    "=============== Step: {step} ===============\n"
    "Tape:\t{tape}\n"
    "State:\t\t{state}\tReplace:\t{write}\n"
    "Next state:\t{next_state}\tMove:\t\t{move}\n"
)


def format_transition(transition, step):
    """Render one step as a human-readable report record."""
    rule = transition.rule
    return REPORT_TEMPLATE.format(
        step=step,
        tape=str(transition.tape),
        state=transition.state,
        write=rule.write,
        next_state=rule.next_state,
        move=str(rule.move),
    )


def write_history(history, stream):
    for step, transition in enumerate(history):
        stream.write(format_transition(transition, step))
    stream.flush()


class ReportWriter:
    """History listener streaming a report record for every new transition."""

    def __init__(self, stream):
        self.stream = stream

    def __call__(self, transition, count):
        self.stream.write(format_transition(transition, count))
        self.stream.flush()
