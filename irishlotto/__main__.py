from irishlotto.main import main

main()
