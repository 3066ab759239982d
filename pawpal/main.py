import gradio as gr

from pawpal.config import settings
from pawpal.llm.context import format_conversation_turns
from pawpal.schemas import PromptRequest
from pawpal.services.chat_service import PawPalChatService

service = PawPalChatService()


async def chat_fn(message: str, history: list[dict]) -> str:
    request = PromptRequest(
        pet=service.pet_store.get_pet_profile(),
        history=service.pet_store.get_medical_history(),
        memory=format_conversation_turns(history),
        user_message=message,
    )
    return await service.generate_response(request)


async def daily_tip_fn() -> str:
    return await service.generate_daily_tip(service.pet_store.get_pet_profile())


def build_demo() -> gr.Blocks:
    pet = service.pet_store.get_pet_profile()
    with gr.Blocks(title="PawPal") as demo:
        gr.Markdown(
            f"""
            # PawPal 🐾
            Your caring pet assistant for {pet.name} the {pet.breed}.
            Ask about health, food, grooming or behavior. For emergencies, always call your vet.
            """
        )
        with gr.Row():
            tip_button = gr.Button("Daily tip")
            tip_box = gr.Textbox(label="Today's tip", interactive=False)
        tip_button.click(fn=daily_tip_fn, outputs=tip_box)
        gr.ChatInterface(
            fn=chat_fn,
            type="messages",
            examples=[
                f"{pet.name} seems to be limping a bit. Should I be worried?",
                f"What food is best for {pet.name}?",
                f"How often should I bath {pet.name}?",
                f"{pet.name} keeps barking at night",
            ],
        )
    return demo


if __name__ == "__main__":
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
