"""bugscope: structured AI debugging requests over multiple LLM providers.

    from bugscope.llm import diagnose

    result = diagnose(code, "it loops forever", "gpt-4", api_key)
    print(result.problem_analysis)
"""
