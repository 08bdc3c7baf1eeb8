"""
The MODEL layer contains pure data structures and the scoring math.
It has NO knowledge of the GUI (Qt).
It deals with Points, Parameters, Metrics, the lab state and the quiz bank.
"""
