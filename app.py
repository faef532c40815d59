import logging
from functools import partial

import gradio as gr

from json_schema_form.config import load_settings
from json_schema_form.handlers import (
    copy_form_values,
    field_label,
    load_default_values,
    prepare_schema_payload,
    submit_form_handler,
    update_form_value,
)
from json_schema_form.schema_utils import list_form_fields

# --- UI Definition ---
with gr.Blocks(title="JSON Schema Form") as demo:
    gr.Markdown("# JSON Schema Form")
    gr.Markdown("Upload a JSON Schema, fill in the generated form, and get back a nested, typed JSON object.")

    # State
    schema_state = gr.State()
    form_values_state = gr.State(value={})
    default_values_state = gr.State(value={})

    with gr.Row():
        # Left Panel: Schema & Form
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            schema_input = gr.File(label="Upload JSON Schema", file_types=[".json"])
            defaults_input = gr.File(label="Default Values (optional)", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Fill In")

            @gr.render(inputs=[schema_state, default_values_state], triggers=[schema_state.change, default_values_state.change])
            def render_form(schema, defaults):
                if schema is None:
                    gr.Markdown("No schema loaded.")
                    return

                fields = list_form_fields(schema)
                if not fields:
                    gr.Markdown("Schema has no fields.")
                    return

                defaults = defaults or {}
                for field in fields:
                    tb = gr.Textbox(
                        label=field_label(field),
                        value=defaults.get(field.path, ""),
                        info=field.schema.get("description"),
                        placeholder=field.schema.get("type", ""),
                    )
                    tb.change(fn=partial(update_form_value, field.path), inputs=[tb, form_values_state], outputs=[form_values_state])

        # Right Panel: Result
        with gr.Column(scale=1):
            gr.Markdown("### 3. Submit")
            submit_btn = gr.Button("Build Object", variant="primary", interactive=False)
            result_json = gr.JSON(label="Result")
            diagnostics = gr.Dataframe(
                headers=["Path", "Problem", "Details"],
                datatype=["str", "str", "str"],
                col_count=(3, "fixed"),
                interactive=False,
                label="Diagnostics",
            )

    schema_input.upload(
        fn=prepare_schema_payload,
        inputs=[schema_input],
        outputs=[schema_state, form_values_state, submit_btn, status_msg],
    ).then(
        fn=copy_form_values,
        inputs=[form_values_state],
        outputs=[default_values_state],
    )

    defaults_input.upload(
        fn=load_default_values,
        inputs=[defaults_input, schema_state],
        outputs=[default_values_state, status_msg],
    ).then(
        fn=copy_form_values,
        inputs=[default_values_state],
        outputs=[form_values_state],
    )

    submit_btn.click(
        fn=submit_form_handler,
        inputs=[schema_state, form_values_state],
        outputs=[result_json, diagnostics, status_msg],
    )

if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
