Access_Token = str
Answer_Text = str
HTTP_Status = int
Webhook_URL = str
