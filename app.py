import logging

import gradio as gr

from structural_toolkit.config import Config
from structural_toolkit.handlers_demo import (
    camel_case_handler,
    curry_handler,
    debounce_handler,
    deep_clone_handler,
    deep_equal_handler,
    flatten_handler,
    memoize_handler,
    parse_query_handler,
)

Config.validate()

logging.basicConfig(
    level=Config.log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)
logger = logging.getLogger(__name__)


# --- UI Definition ---
with gr.Blocks(title="Structural Toolkit") as demo:
    gr.Markdown("# Structural Toolkit")
    gr.Markdown("Run each utility on a sample input and inspect the result.")

    with gr.Tab("Structures"):
        with gr.Accordion("1. Deep Clone", open=True):
            gr.Markdown("Clone `{a: 1, b: {c: 2}, d: now}` and compare it with the original.")
            deep_clone_btn = gr.Button("Run")
            deep_clone_result = gr.Code(language="json", label="Result")

        with gr.Accordion("2. Flatten Nested List", open=False):
            gr.Markdown("Flatten `[1, [2, [3, 4], 5]]`.")
            flatten_btn = gr.Button("Run")
            flatten_result = gr.Code(language="json", label="Result")

        with gr.Accordion("3. Deep Equality", open=False):
            gr.Markdown("Compare two equal objects and two that differ in a nested value.")
            deep_equal_btn = gr.Button("Run")
            deep_equal_result = gr.Code(language="json", label="Result")

    with gr.Tab("Functions"):
        with gr.Accordion("4. Debounce", open=True):
            gr.Markdown(f"Click repeatedly; one `Debounced!` line is logged {Config.DEBOUNCE_DELAY_MS}ms after the last click.")
            debounce_btn = gr.Button("Run")
            debounce_result = gr.Textbox(label="Result", interactive=False)

        with gr.Accordion("5. Memoize", open=False):
            gr.Markdown("Call a memoized `add(2, 3)` twice.")
            memoize_btn = gr.Button("Run")
            memoize_result = gr.Code(language="json", label="Result")

        with gr.Accordion("6. Curry", open=False):
            gr.Markdown("Evaluate `curriedAdd(1)(2)(3)`.")
            curry_btn = gr.Button("Run")
            curry_result = gr.Code(language="json", label="Result")

    with gr.Tab("Strings"):
        with gr.Accordion("7. camelCase", open=True):
            camel_input = gr.Textbox(label="Input", value="hello-world_test")
            camel_btn = gr.Button("Run")
            camel_result = gr.Code(language="json", label="Result")

        with gr.Accordion("8. Parse Query String", open=False):
            query_input = gr.Textbox(label="Query", value="?foo=1&bar=2&name=John%20Doe")
            query_btn = gr.Button("Run")
            query_result = gr.Code(language="json", label="Result")

    deep_clone_btn.click(fn=deep_clone_handler, inputs=[], outputs=[deep_clone_result])
    flatten_btn.click(fn=flatten_handler, inputs=[], outputs=[flatten_result])
    deep_equal_btn.click(fn=deep_equal_handler, inputs=[], outputs=[deep_equal_result])
    debounce_btn.click(fn=debounce_handler, inputs=[], outputs=[debounce_result])
    memoize_btn.click(fn=memoize_handler, inputs=[], outputs=[memoize_result])
    curry_btn.click(fn=curry_handler, inputs=[], outputs=[curry_result])
    camel_btn.click(fn=camel_case_handler, inputs=[camel_input], outputs=[camel_result])
    query_btn.click(fn=parse_query_handler, inputs=[query_input], outputs=[query_result])

if __name__ == "__main__":
    logger.info("Starting demo on %s:%s", Config.SERVER_NAME, Config.SERVER_PORT)
    demo.launch(server_name=Config.SERVER_NAME, server_port=Config.SERVER_PORT)
